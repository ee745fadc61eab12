"""Vaultmend API: command functions returning StageResult."""
