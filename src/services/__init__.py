"""Provider clients, the snapshot store and the run orchestrator."""
