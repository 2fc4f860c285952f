"""Request orchestration for the Insu chat service."""
