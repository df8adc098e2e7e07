"""NetTopo service layer shared by the API server and the CLI."""
