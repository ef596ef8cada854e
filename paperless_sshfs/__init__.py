"""SSHFS storage setup for Paperless-ngx in a Proxmox LXC container.

Core design goals:
- One-shot and idempotent (safe to re-run with the same answers)
- Interactive, with an explicit abort point before any change
- Every external command logged
- Fail fast; no rollback
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
