"""Mock AUR RPC server for testing code that uses the AUR client."""

from ._mocks import MockAURRPC, mock_aur_rpc

__all__ = ["MockAURRPC", "mock_aur_rpc"]
