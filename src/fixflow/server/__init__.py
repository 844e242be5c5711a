"""fixflow.server - REST API host for the troubleshooting flow."""
