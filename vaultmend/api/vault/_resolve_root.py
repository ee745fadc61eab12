"""Pick the vault root for a command (private)."""

from ..config.VaultmendConfig import VaultmendConfig


def _resolve_root(root: str | None, config: VaultmendConfig) -> str:
    """Return the explicit root, else the configured one.

    Raises:
        ValueError: If neither is available
    """
    if root:
        return root
    if config.vault.base_dir:
        return config.vault.base_dir
    raise ValueError("No vault root given and vault.base_dir is not configured")
