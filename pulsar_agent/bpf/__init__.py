"""eBPF event types, shared buffers, senders, procfs and mount helpers, probe building and syscall tables."""

__all__ = [
    "timestamp",
    "data_array",
    "string_array",
    "events",
    "senders",
    "procfs",
    "bpf_fs",
    "trace_pipe",
    "builder",
    "errors",
    "syscalls",
    "platform",
]