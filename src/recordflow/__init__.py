"""
recordflow core package.

Fetches one record from a data source and emits it to a data sink:
- `recordflow.capabilities` defines the `DataSource` / `DataSink` contracts
- `recordflow.pipeline` sequences fetch -> emit
- `recordflow.sources` / `recordflow.sinks` hold the production adapters
- `recordflow.testing` holds recording doubles for call-order tests
- `recordflow.cli` exposes the Typer command line

Configuration:
- Shared constants live in `recordflow.global_config`.
- Endpoint and timeout validation live in `recordflow.config`.
"""
