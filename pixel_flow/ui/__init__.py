"""pygame presentation layer. Reads game snapshots, sends intents."""
