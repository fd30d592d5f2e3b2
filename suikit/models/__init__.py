"""Request and response models for the Sui JSON-RPC API, with intent and signature helpers."""