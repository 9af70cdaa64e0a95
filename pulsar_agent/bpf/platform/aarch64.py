"""System call names for Linux on AArch64, keyed by system call number."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SYSCALLS: Mapping[int, str] = MappingProxyType(
    {
        0: "IO_SETUP",
        1: "IO_DESTROY",
        2: "IO_SUBMIT",
        3: "IO_CANCEL",
        4: "IO_GETEVENTS",
        5: "SETXATTR",
        6: "LSETXATTR",
        7: "FSETXATTR",
        8: "GETXATTR",
        9: "LGETXATTR",
        10: "FGETXATTR",
        11: "LISTXATTR",
        12: "LLISTXATTR",
        13: "FLISTXATTR",
        14: "REMOVEXATTR",
        15: "LREMOVEXATTR",
        16: "FREMOVEXATTR",
        17: "GETCWD",
        18: "LOOKUP_DCOOKIE",
        19: "EVENTFD2",
        20: "EPOLL_CREATE1",
        21: "EPOLL_CTL",
        22: "EPOLL_PWAIT",
        23: "DUP",
        24: "DUP3",
        25: "FCNTL",
        26: "INOTIFY_INIT1",
        27: "INOTIFY_ADD_WATCH",
        28: "INOTIFY_RM_WATCH",
        29: "IOCTL",
        30: "IOPRIO_SET",
        31: "IOPRIO_GET",
        32: "FLOCK",
        33: "MKNODAT",
        34: "MKDIRAT",
        35: "UNLINKAT",
        36: "SYMLINKAT",
        37: "LINKAT",
        38: "RENAMEAT",
        39: "UMOUNT2",
        40: "MOUNT",
        41: "PIVOT_ROOT",
        42: "NFSSERVCTL",
        43: "STATFS",
        44: "FSTATFS",
        45: "TRUNCATE",
        46: "FTRUNCATE",
        47: "FALLOCATE",
        48: "FACCESSAT",
        49: "CHDIR",
        50: "FCHDIR",
        51: "CHROOT",
        52: "FCHMOD",
        53: "FCHMODAT",
        54: "FCHOWNAT",
        55: "FCHOWN",
        56: "OPENAT",
        57: "CLOSE",
        58: "VHANGUP",
        59: "PIPE2",
        60: "QUOTACTL",
        61: "GETDENTS64",
        62: "LSEEK",
        63: "READ",
        64: "WRITE",
        65: "READV",
        66: "WRITEV",
        67: "PREAD64",
        68: "PWRITE64",
        69: "PREADV",
        70: "PWRITEV",
        71: "SENDFILE",
        72: "PSELECT6",
        73: "PPOLL",
        74: "SIGNALFD4",
        75: "VMSPLICE",
        76: "SPLICE",
        77: "TEE",
        78: "READLINKAT",
        79: "NEWFSTATAT",
        80: "FSTAT",
        81: "SYNC",
        82: "FSYNC",
        83: "FDATASYNC",
        84: "SYNC_FILE_RANGE",
        85: "TIMERFD_CREATE",
        86: "TIMERFD_SETTIME",
        87: "TIMERFD_GETTIME",
        88: "UTIMENSAT",
        89: "ACCT",
        90: "CAPGET",
        91: "CAPSET",
        92: "PERSONALITY",
        93: "EXIT",
        94: "EXIT_GROUP",
        95: "WAITID",
        96: "SET_TID_ADDRESS",
        97: "UNSHARE",
        98: "FUTEX",
        99: "SET_ROBUST_LIST",
        100: "GET_ROBUST_LIST",
        101: "NANOSLEEP",
        102: "GETITIMER",
        103: "SETITIMER",
        104: "KEXEC_LOAD",
        105: "INIT_MODULE",
        106: "DELETE_MODULE",
        107: "TIMER_CREATE",
        108: "TIMER_GETTIME",
        109: "TIMER_GETOVERRUN",
        110: "TIMER_SETTIME",
        111: "TIMER_DELETE",
        112: "CLOCK_SETTIME",
        113: "CLOCK_GETTIME",
        114: "CLOCK_GETRES",
        115: "CLOCK_NANOSLEEP",
        116: "SYSLOG",
        117: "PTRACE",
        118: "SCHED_SETPARAM",
        119: "SCHED_SETSCHEDULER",
        120: "SCHED_GETSCHEDULER",
        121: "SCHED_GETPARAM",
        122: "SCHED_SETAFFINITY",
        123: "SCHED_GETAFFINITY",
        124: "SCHED_YIELD",
        125: "SCHED_GET_PRIORITY_MAX",
        126: "SCHED_GET_PRIORITY_MIN",
        127: "SCHED_RR_GET_INTERVAL",
        128: "RESTART_SYSCALL",
        129: "KILL",
        130: "TKILL",
        131: "TGKILL",
        132: "SIGALTSTACK",
        133: "RT_SIGSUSPEND",
        134: "RT_SIGACTION",
        135: "RT_SIGPROCMASK",
        136: "RT_SIGPENDING",
        137: "RT_SIGTIMEDWAIT",
        138: "RT_SIGQUEUEINFO",
        139: "RT_SIGRETURN",
        140: "SETPRIORITY",
        141: "GETPRIORITY",
        142: "REBOOT",
        143: "SETREGID",
        144: "SETGID",
        145: "SETREUID",
        146: "SETUID",
        147: "SETRESUID",
        148: "GETRESUID",
        149: "SETRESGID",
        150: "GETRESGID",
        151: "SETFSUID",
        152: "SETFSGID",
        153: "TIMES",
        154: "SETPGID",
        155: "GETPGID",
        156: "GETSID",
        157: "SETSID",
        158: "GETGROUPS",
        159: "SETGROUPS",
        160: "UNAME",
        161: "SETHOSTNAME",
        162: "SETDOMAINNAME",
        163: "GETRLIMIT",
        164: "SETRLIMIT",
        165: "GETRUSAGE",
        166: "UMASK",
        167: "PRCTL",
        168: "GETCPU",
        169: "GETTIMEOFDAY",
        170: "SETTIMEOFDAY",
        171: "ADJTIMEX",
        172: "GETPID",
        173: "GETPPID",
        174: "GETUID",
        175: "GETEUID",
        176: "GETGID",
        177: "GETEGID",
        178: "GETTID",
        179: "SYSINFO",
        180: "MQ_OPEN",
        181: "MQ_UNLINK",
        182: "MQ_TIMEDSEND",
        183: "MQ_TIMEDRECEIVE",
        184: "MQ_NOTIFY",
        185: "MQ_GETSETATTR",
        186: "MSGGET",
        187: "MSGCTL",
        188: "MSGRCV",
        189: "MSGSND",
        190: "SEMGET",
        191: "SEMCTL",
        192: "SEMTIMEDOP",
        193: "SEMOP",
        194: "SHMGET",
        195: "SHMCTL",
        196: "SHMAT",
        197: "SHMDT",
        198: "SOCKET",
        199: "SOCKETPAIR",
        200: "BIND",
        201: "LISTEN",
        202: "ACCEPT",
        203: "CONNECT",
        204: "GETSOCKNAME",
        205: "GETPEERNAME",
        206: "SENDTO",
        207: "RECVFROM",
        208: "SETSOCKOPT",
        209: "GETSOCKOPT",
        210: "SHUTDOWN",
        211: "SENDMSG",
        212: "RECVMSG",
        213: "READAHEAD",
        214: "BRK",
        215: "MUNMAP",
        216: "MREMAP",
        217: "ADD_KEY",
        218: "REQUEST_KEY",
        219: "KEYCTL",
        220: "CLONE",
        221: "EXECVE",
        222: "MMAP",
        223: "FADVISE64",
        224: "SWAPON",
        225: "SWAPOFF",
        226: "MPROTECT",
        227: "MSYNC",
        228: "MLOCK",
        229: "MUNLOCK",
        230: "MLOCKALL",
        231: "MUNLOCKALL",
        232: "MINCORE",
        233: "MADVISE",
        234: "REMAP_FILE_PAGES",
        235: "MBIND",
        236: "GET_MEMPOLICY",
        237: "SET_MEMPOLICY",
        238: "MIGRATE_PAGES",
        239: "MOVE_PAGES",
        240: "RT_TGSIGQUEUEINFO",
        241: "PERF_EVENT_OPEN",
        242: "ACCEPT4",
        243: "RECVMMSG",
        260: "WAIT4",
        261: "PRLIMIT64",
        262: "FANOTIFY_INIT",
        263: "FANOTIFY_MARK",
        264: "NAME_TO_HANDLE_AT",
        265: "OPEN_BY_HANDLE_AT",
        266: "CLOCK_ADJTIME",
        267: "SYNCFS",
        268: "SETNS",
        269: "SENDMMSG",
        270: "PROCESS_VM_READV",
        271: "PROCESS_VM_WRITEV",
        272: "KCMP",
        273: "FINIT_MODULE",
        274: "SCHED_SETATTR",
        275: "SCHED_GETATTR",
        276: "RENAMEAT2",
        277: "SECCOMP",
        278: "GETRANDOM",
        279: "MEMFD_CREATE",
        280: "BPF",
        281: "EXECVEAT",
        282: "USERFAULTFD",
        283: "MEMBARRIER",
        284: "MLOCK2",
        285: "COPY_FILE_RANGE",
        286: "PREADV2",
        287: "PWRITEV2",
        288: "PKEY_MPROTECT",
        289: "PKEY_ALLOC",
        290: "PKEY_FREE",
        291: "STATX",
    }
)