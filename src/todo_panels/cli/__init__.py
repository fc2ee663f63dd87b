"""Terminal UI and command line entry point."""
