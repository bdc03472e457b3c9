"""Array algorithms: rotated-array search, quickselect, subarray problems and permutations."""

__version__ = "0.1.0"
__all__ = ["basics", "search", "subarrays"]