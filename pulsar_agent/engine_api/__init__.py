"""Local control API for the agent, served and consumed over a Unix domain socket."""

__all__ = ["dto", "error", "client", "server"]