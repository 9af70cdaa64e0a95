"""System call names for Linux on 32-bit ARM (EABI), keyed by system call number."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SYSCALLS: Mapping[int, str] = MappingProxyType(
    {
        0: "RESTART_SYSCALL",
        1: "EXIT",
        2: "FORK",
        3: "READ",
        4: "WRITE",
        5: "OPEN",
        6: "CLOSE",
        8: "CREAT",
        9: "LINK",
        10: "UNLINK",
        11: "EXECVE",
        12: "CHDIR",
        14: "MKNOD",
        15: "CHMOD",
        16: "LCHOWN",
        19: "LSEEK",
        20: "GETPID",
        21: "MOUNT",
        23: "SETUID",
        24: "GETUID",
        26: "PTRACE",
        29: "PAUSE",
        33: "ACCESS",
        34: "NICE",
        36: "SYNC",
        37: "KILL",
        38: "RENAME",
        39: "MKDIR",
        40: "RMDIR",
        41: "DUP",
        42: "PIPE",
        43: "TIMES",
        45: "BRK",
        46: "SETGID",
        47: "GETGID",
        49: "GETEUID",
        50: "GETEGID",
        51: "ACCT",
        52: "UMOUNT2",
        54: "IOCTL",
        55: "FCNTL",
        57: "SETPGID",
        60: "UMASK",
        61: "CHROOT",
        62: "USTAT",
        63: "DUP2",
        64: "GETPPID",
        65: "GETPGRP",
        66: "SETSID",
        67: "SIGACTION",
        70: "SETREUID",
        71: "SETREGID",
        72: "SIGSUSPEND",
        73: "SIGPENDING",
        74: "SETHOSTNAME",
        75: "SETRLIMIT",
        77: "GETRUSAGE",
        78: "GETTIMEOFDAY",
        79: "SETTIMEOFDAY",
        80: "GETGROUPS",
        81: "SETGROUPS",
        83: "SYMLINK",
        85: "READLINK",
        86: "USELIB",
        87: "SWAPON",
        88: "REBOOT",
        91: "MUNMAP",
        92: "TRUNCATE",
        93: "FTRUNCATE",
        94: "FCHMOD",
        95: "FCHOWN",
        96: "GETPRIORITY",
        97: "SETPRIORITY",
        99: "STATFS",
        100: "FSTATFS",
        103: "SYSLOG",
        104: "SETITIMER",
        105: "GETITIMER",
        106: "STAT",
        107: "LSTAT",
        108: "FSTAT",
        111: "VHANGUP",
        114: "WAIT4",
        115: "SWAPOFF",
        116: "SYSINFO",
        118: "FSYNC",
        119: "SIGRETURN",
        120: "CLONE",
        121: "SETDOMAINNAME",
        122: "UNAME",
        124: "ADJTIMEX",
        125: "MPROTECT",
        126: "SIGPROCMASK",
        128: "INIT_MODULE",
        129: "DELETE_MODULE",
        131: "QUOTACTL",
        132: "GETPGID",
        133: "FCHDIR",
        134: "BDFLUSH",
        135: "SYSFS",
        136: "PERSONALITY",
        138: "SETFSUID",
        139: "SETFSGID",
        140: "_LLSEEK",
        141: "GETDENTS",
        142: "_NEWSELECT",
        143: "FLOCK",
        144: "MSYNC",
        145: "READV",
        146: "WRITEV",
        147: "GETSID",
        148: "FDATASYNC",
        149: "_SYSCTL",
        150: "MLOCK",
        151: "MUNLOCK",
        152: "MLOCKALL",
        153: "MUNLOCKALL",
        154: "SCHED_SETPARAM",
        155: "SCHED_GETPARAM",
        156: "SCHED_SETSCHEDULER",
        157: "SCHED_GETSCHEDULER",
        158: "SCHED_YIELD",
        159: "SCHED_GET_PRIORITY_MAX",
        160: "SCHED_GET_PRIORITY_MIN",
        161: "SCHED_RR_GET_INTERVAL",
        162: "NANOSLEEP",
        163: "MREMAP",
        164: "SETRESUID",
        165: "GETRESUID",
        168: "POLL",
        169: "NFSSERVCTL",
        170: "SETRESGID",
        171: "GETRESGID",
        172: "PRCTL",
        173: "RT_SIGRETURN",
        174: "RT_SIGACTION",
        175: "RT_SIGPROCMASK",
        176: "RT_SIGPENDING",
        177: "RT_SIGTIMEDWAIT",
        178: "RT_SIGQUEUEINFO",
        179: "RT_SIGSUSPEND",
        180: "PREAD64",
        181: "PWRITE64",
        182: "CHOWN",
        183: "GETCWD",
        184: "CAPGET",
        185: "CAPSET",
        186: "SIGALTSTACK",
        187: "SENDFILE",
        190: "VFORK",
        191: "UGETRLIMIT",
        192: "MMAP2",
        193: "TRUNCATE64",
        194: "FTRUNCATE64",
        195: "STAT64",
        196: "LSTAT64",
        197: "FSTAT64",
        198: "LCHOWN32",
        199: "GETUID32",
        200: "GETGID32",
        201: "GETEUID32",
        202: "GETEGID32",
        203: "SETREUID32",
        204: "SETREGID32",
        205: "GETGROUPS32",
        206: "SETGROUPS32",
        207: "FCHOWN32",
        208: "SETRESUID32",
        209: "GETRESUID32",
        210: "SETRESGID32",
        211: "GETRESGID32",
        212: "CHOWN32",
        213: "SETUID32",
        214: "SETGID32",
        215: "SETFSUID32",
        216: "SETFSGID32",
        217: "GETDENTS64",
        218: "PIVOT_ROOT",
        219: "MINCORE",
        220: "MADVISE",
        221: "FCNTL64",
        224: "GETTID",
        225: "READAHEAD",
        226: "SETXATTR",
        227: "LSETXATTR",
        228: "FSETXATTR",
        229: "GETXATTR",
        230: "LGETXATTR",
        231: "FGETXATTR",
        232: "LISTXATTR",
        233: "LLISTXATTR",
        234: "FLISTXATTR",
        235: "REMOVEXATTR",
        236: "LREMOVEXATTR",
        237: "FREMOVEXATTR",
        238: "TKILL",
        239: "SENDFILE64",
        240: "FUTEX",
        241: "SCHED_SETAFFINITY",
        242: "SCHED_GETAFFINITY",
        243: "IO_SETUP",
        244: "IO_DESTROY",
        245: "IO_GETEVENTS",
        246: "IO_SUBMIT",
        247: "IO_CANCEL",
        248: "EXIT_GROUP",
        249: "LOOKUP_DCOOKIE",
        250: "EPOLL_CREATE",
        251: "EPOLL_CTL",
        252: "EPOLL_WAIT",
        253: "REMAP_FILE_PAGES",
        256: "SET_TID_ADDRESS",
        257: "TIMER_CREATE",
        258: "TIMER_SETTIME",
        259: "TIMER_GETTIME",
        260: "TIMER_GETOVERRUN",
        261: "TIMER_DELETE",
        262: "CLOCK_SETTIME",
        263: "CLOCK_GETTIME",
        264: "CLOCK_GETRES",
        265: "CLOCK_NANOSLEEP",
        266: "STATFS64",
        267: "FSTATFS64",
        268: "TGKILL",
        269: "UTIMES",
        270: "ARM_FADVISE64_64",
        271: "PCICONFIG_IOBASE",
        272: "PCICONFIG_READ",
        273: "PCICONFIG_WRITE",
        274: "MQ_OPEN",
        275: "MQ_UNLINK",
        276: "MQ_TIMEDSEND",
        277: "MQ_TIMEDRECEIVE",
        278: "MQ_NOTIFY",
        279: "MQ_GETSETATTR",
        280: "WAITID",
        281: "SOCKET",
        282: "BIND",
        283: "CONNECT",
        284: "LISTEN",
        285: "ACCEPT",
        286: "GETSOCKNAME",
        287: "GETPEERNAME",
        288: "SOCKETPAIR",
        289: "SEND",
        290: "SENDTO",
        291: "RECV",
        292: "RECVFROM",
        293: "SHUTDOWN",
        294: "SETSOCKOPT",
        295: "GETSOCKOPT",
        296: "SENDMSG",
        297: "RECVMSG",
        298: "SEMOP",
        299: "SEMGET",
        300: "SEMCTL",
        301: "MSGSND",
        302: "MSGRCV",
        303: "MSGGET",
        304: "MSGCTL",
        305: "SHMAT",
        306: "SHMDT",
        307: "SHMGET",
        308: "SHMCTL",
        309: "ADD_KEY",
        310: "REQUEST_KEY",
        311: "KEYCTL",
        312: "SEMTIMEDOP",
        313: "VSERVER",
        314: "IOPRIO_SET",
        315: "IOPRIO_GET",
        316: "INOTIFY_INIT",
        317: "INOTIFY_ADD_WATCH",
        318: "INOTIFY_RM_WATCH",
        319: "MBIND",
        320: "GET_MEMPOLICY",
        321: "SET_MEMPOLICY",
        322: "OPENAT",
        323: "MKDIRAT",
        324: "MKNODAT",
        325: "FCHOWNAT",
        326: "FUTIMESAT",
        327: "FSTATAT64",
        328: "UNLINKAT",
        329: "RENAMEAT",
        330: "LINKAT",
        331: "SYMLINKAT",
        332: "READLINKAT",
        333: "FCHMODAT",
        334: "FACCESSAT",
        335: "PSELECT6",
        336: "PPOLL",
        337: "UNSHARE",
        338: "SET_ROBUST_LIST",
        339: "GET_ROBUST_LIST",
        340: "SPLICE",
        # Also known as ARM_SYNC_FILE_RANGE; the later name takes precedence.
        341: "SYNC_FILE_RANGE2",
        342: "TEE",
        343: "VMSPLICE",
        344: "MOVE_PAGES",
        345: "GETCPU",
        346: "EPOLL_PWAIT",
        347: "KEXEC_LOAD",
        348: "UTIMENSAT",
        349: "SIGNALFD",
        350: "TIMERFD_CREATE",
        351: "EVENTFD",
        352: "FALLOCATE",
        353: "TIMERFD_SETTIME",
        354: "TIMERFD_GETTIME",
        355: "SIGNALFD4",
        356: "EVENTFD2",
        357: "EPOLL_CREATE1",
        358: "DUP3",
        359: "PIPE2",
        360: "INOTIFY_INIT1",
        361: "PREADV",
        362: "PWRITEV",
        363: "RT_TGSIGQUEUEINFO",
        364: "PERF_EVENT_OPEN",
        365: "RECVMMSG",
        366: "ACCEPT4",
        367: "FANOTIFY_INIT",
        368: "FANOTIFY_MARK",
        369: "PRLIMIT64",
        370: "NAME_TO_HANDLE_AT",
        371: "OPEN_BY_HANDLE_AT",
        372: "CLOCK_ADJTIME",
        373: "SYNCFS",
        374: "SENDMMSG",
        375: "SETNS",
        376: "PROCESS_VM_READV",
        377: "PROCESS_VM_WRITEV",
        378: "KCMP",
        379: "FINIT_MODULE",
        380: "SCHED_SETATTR",
        381: "SCHED_GETATTR",
        382: "RENAMEAT2",
        383: "SECCOMP",
        384: "GETRANDOM",
        385: "MEMFD_CREATE",
        386: "BPF",
        387: "EXECVEAT",
    }
)