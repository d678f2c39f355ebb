"""
Supporting utilities: sample grids, image loading, diagnostics and generic algorithms.
"""
