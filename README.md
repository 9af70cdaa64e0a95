# pulsar_agent

Building blocks for a Linux runtime-monitoring agent that collects events
from eBPF probes, plus a small control API served over a Unix socket.

## What is inside

### `pulsar_agent.bpf`

- `timestamp` – `Timestamp`, nanoseconds since boot (the clock eBPF
  programs use). `Timestamp.now()` reads the monotonic clock (zero if it
  cannot be read) and `to_system_time()` turns an event time into a UTC
  `datetime`. Timestamps support `+ int`, `- Timestamp` and ordering.
- `data_array` – `DataArray`, a length-prefixed byte buffer of fixed
  capacity. `from_bytes`, `unpack` and `pack` convert to and from the binary
  layout; comparisons look only at the filled part.
- `string_array` – `StringArray`, a zero-terminated string in a fixed-size
  buffer. `from_str`, `unpack`, `pack`, `length()` (None when there is no
  terminator) and `str()`.
- `events` – `BpfEvent` (timestamp, pid, payload), `BpfContext`
  (`create()` falls back to 4096 perf pages when the count is not a power of
  two; `pinning_path` depends on `Pinning`), `BpfLogLevel`, and the
  `ProgramError` / `ProgramNotFoundError` exceptions.
- `senders` – `BpfSender`, `QueueSender` (wraps an `asyncio.Queue` or
  `queue.Queue`, never blocks and drops events when the queue is full) and
  `BpfSenderWrapper`, which runs a callback on every event (not on errors)
  before passing it on.
- `procfs` – reads process details from `/proc`: `get_process_image`,
  `get_process_cwd`, `get_process_fd_path`, `get_process_command_line`,
  `get_process_comm`, `get_process_parent_pid`, `get_process_user_id`,
  `get_process_cgroup_id` and `get_running_processes`. Failures raise
  `ReadFileError`, `ParentNotFoundError` or `UserNotFoundError`, all
  subclasses of `ProcfsError`.
- `bpf_fs` – `parse_mountinfo`, `read_mountinfo`, `find_bpf_mount`,
  `count_bpf_mounts` and `check_or_mount_bpf_fs()`, which mounts the BPF
  file system at `/sys/fs/bpf` with the `mount` command when it is missing
  and raises `BpfFsError` if it is mounted with another type or more than
  once.
- `trace_pipe` – `await start(path)` forwards `bpf_printk` lines from the
  kernel trace pipe to the `trace_pipe` logger and returns a `StopHandle`;
  `format_msg` and `split_messages` do the line handling.
- `builder` – `build(probe, include_path, out_dir, arch, clang)` compiles a
  probe with clang for the BPF target into `probe.bpf.o` and returns its
  path, raising `BuildError` on failure. `out_dir` defaults to `$OUT_DIR`,
  `clang` to `$CLANG` or `clang`. `clang_command` and `target_arch_define`
  show the command line it runs.
- `errors` – `format_error_chain(err)` renders an exception with its chain
  of causes; `log_error(msg, err)` logs it.
- `syscalls` – `syscall_table(arch)` and `syscall_name(number, arch)`,
  defaulting to the current machine; `MAX_SYSCALLS` is 512.
- `platform` – the `SYSCALLS` tables for `x86_64`, `x86`, `aarch64`,
  `armeabi` and `riscv64`.

### `pulsar_agent.engine_api`

- `dto` – `ConfigKV` and `ModuleConfigKVs`, with `to_dict` / `from_dict`,
  and `DEFAULT_UDS` (`/var/run/pulsar.sock`).
- `error` – `EngineApiError` with `BadRequest`, `InternalServerError`
  and `ServiceUnavailable`, each with its HTTP `status_code()` and `body()`.
- `server` – `build_app(daemon)` builds the aiohttp application and
  `await run_api_server(daemon, socket_path)` serves it on a Unix socket,
  returning a `ServerHandle` whose `stop()` shuts it down and removes the
  socket. The daemon object must provide the coroutines `modules()`,
  `get_configurations()`, `get_configuration(name)`, `start(name)`,
  `stop(name)`, `restart(name)` and `update_configuration(name, key, value)`,
  and raise `EngineApiError` on failure.
- `client` – `EngineApiClient`, which talks to that server and raises
  `EngineApiClientError`.

## Examples

Buffers shared with eBPF code:

```python
from pulsar_agent.bpf.string_array import StringArray
from pulsar_agent.bpf.data_array import DataArray

name = StringArray.from_str("hello", 100)
assert name == StringArray.from_str("hello", 100)
assert name != StringArray.from_str("hellow", 100)
print(str(name))                 # hello

payload = DataArray.from_bytes(b"\x01\x02\x03", 16)
assert len(payload) == 3
assert bytes(payload) == b"\x01\x02\x03"
```

Syscall names:

```python
from pulsar_agent.bpf.syscalls import syscall_name

print(syscall_name(59, "x86_64"))    # EXECVE
print(syscall_name(221, "aarch64"))  # EXECVE
```

Reading process details:

```python
import os
from pulsar_agent.bpf import procfs

pid = os.getpid()
print(procfs.get_process_comm(pid))
print(procfs.get_process_command_line(pid))
print(procfs.get_process_parent_pid(pid))
```

Controlling a running agent through its socket:

```python
import asyncio
from pulsar_agent.engine_api.client import EngineApiClient

async def main():
    client = EngineApiClient.default()
    for module in await client.list_modules():
        print(module)
    await client.restart("process-monitor")
    await client.set_module_config("process-monitor", "enabled", "true")

asyncio.run(main())
```

## What this package does not do

- It does not load eBPF programs into the kernel, attach probes or read perf
  buffers; events reach a `BpfSender` only from code you supply.
- It has no agent daemon: the engine API server needs a daemon object
  provided by the caller, and no modules are included.
- It installs no command-line tool.

Most of the `/proc`, mount and trace-pipe helpers need Linux, and mounting
the BPF file system needs root.