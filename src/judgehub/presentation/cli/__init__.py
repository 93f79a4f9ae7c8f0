"""Command-line interface for JudgeHub."""
