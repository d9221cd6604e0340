"""Selection processing pipeline.

This package runs the normalize, build, and duplicate-check stages
over editor selections and packages the outcome for the caller.
"""
