"""Batch-operation engine: process runner, batch executor, retry coordinator and scanners."""
