"""Syscall number to name tables for each supported Linux architecture."""

__all__ = ["x86_64", "x86", "aarch64", "armeabi", "riscv64"]