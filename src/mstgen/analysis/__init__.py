"""
The ANALYSIS layer holds the algorithms that run over the MODEL.
"""
from mstgen.analysis.mst import MstBuilder, build_mst

__all__ = ["MstBuilder", "build_mst"]
