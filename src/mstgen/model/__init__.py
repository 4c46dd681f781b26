"""
The MODEL layer contains pure data structures.
It has NO knowledge of any drawing or windowing toolkit.
It deals with Points, Edges, and the state of the point collection.
"""
