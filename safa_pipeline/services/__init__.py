"""Pipeline, orchestration, analysis, export and CLI support services."""
