"""Command line interface; run with ``python -m safa_pipeline.cli``."""
