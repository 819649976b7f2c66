"""Platform detection and process execution for clipio."""
