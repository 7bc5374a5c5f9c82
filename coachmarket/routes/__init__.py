from .rpc import rpc_bp

__all__ = ["rpc_bp"]
