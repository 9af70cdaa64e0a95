"""System call names for Linux on 32-bit x86, keyed by system call number."""

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
        7: "WAITPID",
        8: "CREAT",
        9: "LINK",
        10: "UNLINK",
        11: "EXECVE",
        12: "CHDIR",
        13: "TIME",
        14: "MKNOD",
        15: "CHMOD",
        16: "LCHOWN",
        17: "BREAK",
        18: "OLDSTAT",
        19: "LSEEK",
        20: "GETPID",
        21: "MOUNT",
        22: "UMOUNT",
        23: "SETUID",
        24: "GETUID",
        25: "STIME",
        26: "PTRACE",
        27: "ALARM",
        28: "OLDFSTAT",
        29: "PAUSE",
        30: "UTIME",
        31: "STTY",
        32: "GTTY",
        33: "ACCESS",
        34: "NICE",
        35: "FTIME",
        36: "SYNC",
        37: "KILL",
        38: "RENAME",
        39: "MKDIR",
        40: "RMDIR",
        41: "DUP",
        42: "PIPE",
        43: "TIMES",
        44: "PROF",
        45: "BRK",
        46: "SETGID",
        47: "GETGID",
        48: "SIGNAL",
        49: "GETEUID",
        50: "GETEGID",
        51: "ACCT",
        52: "UMOUNT2",
        53: "LOCK",
        54: "IOCTL",
        55: "FCNTL",
        56: "MPX",
        57: "SETPGID",
        58: "ULIMIT",
        59: "OLDOLDUNAME",
        60: "UMASK",
        61: "CHROOT",
        62: "USTAT",
        63: "DUP2",
        64: "GETPPID",
        65: "GETPGRP",
        66: "SETSID",
        67: "SIGACTION",
        68: "SGETMASK",
        69: "SSETMASK",
        70: "SETREUID",
        71: "SETREGID",
        72: "SIGSUSPEND",
        73: "SIGPENDING",
        74: "SETHOSTNAME",
        75: "SETRLIMIT",
        76: "GETRLIMIT",
        77: "GETRUSAGE",
        78: "GETTIMEOFDAY",
        79: "SETTIMEOFDAY",
        80: "GETGROUPS",
        81: "SETGROUPS",
        82: "SELECT",
        83: "SYMLINK",
        84: "OLDLSTAT",
        85: "READLINK",
        86: "USELIB",
        87: "SWAPON",
        88: "REBOOT",
        89: "READDIR",
        90: "MMAP",
        91: "MUNMAP",
        92: "TRUNCATE",
        93: "FTRUNCATE",
        94: "FCHMOD",
        95: "FCHOWN",
        96: "GETPRIORITY",
        97: "SETPRIORITY",
        98: "PROFIL",
        99: "STATFS",
        100: "FSTATFS",
        101: "IOPERM",
        102: "SOCKETCALL",
        103: "SYSLOG",
        104: "SETITIMER",
        105: "GETITIMER",
        106: "STAT",
        107: "LSTAT",
        108: "FSTAT",
        109: "OLDUNAME",
        110: "IOPL",
        111: "VHANGUP",
        112: "IDLE",
        113: "VM86OLD",
        114: "WAIT4",
        115: "SWAPOFF",
        116: "SYSINFO",
        117: "IPC",
        118: "FSYNC",
        119: "SIGRETURN",
        120: "CLONE",
        121: "SETDOMAINNAME",
        122: "UNAME",
        123: "MODIFY_LDT",
        124: "ADJTIMEX",
        125: "MPROTECT",
        126: "SIGPROCMASK",
        127: "CREATE_MODULE",
        128: "INIT_MODULE",
        129: "DELETE_MODULE",
        130: "GET_KERNEL_SYMS",
        131: "QUOTACTL",
        132: "GETPGID",
        133: "FCHDIR",
        134: "BDFLUSH",
        135: "SYSFS",
        136: "PERSONALITY",
        137: "AFS_SYSCALL",
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
        166: "VM86",
        167: "QUERY_MODULE",
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
        188: "GETPMSG",
        189: "PUTPMSG",
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
        217: "PIVOT_ROOT",
        218: "MINCORE",
        219: "MADVISE",
        220: "GETDENTS64",
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
        243: "SET_THREAD_AREA",
        244: "GET_THREAD_AREA",
        245: "IO_SETUP",
        246: "IO_DESTROY",
        247: "IO_GETEVENTS",
        248: "IO_SUBMIT",
        249: "IO_CANCEL",
        250: "FADVISE64",
        252: "EXIT_GROUP",
        253: "LOOKUP_DCOOKIE",
        254: "EPOLL_CREATE",
        255: "EPOLL_CTL",
        256: "EPOLL_WAIT",
        257: "REMAP_FILE_PAGES",
        258: "SET_TID_ADDRESS",
        259: "TIMER_CREATE",
        260: "TIMER_SETTIME",
        261: "TIMER_GETTIME",
        262: "TIMER_GETOVERRUN",
        263: "TIMER_DELETE",
        264: "CLOCK_SETTIME",
        265: "CLOCK_GETTIME",
        266: "CLOCK_GETRES",
        267: "CLOCK_NANOSLEEP",
        268: "STATFS64",
        269: "FSTATFS64",
        270: "TGKILL",
        271: "UTIMES",
        272: "FADVISE64_64",
        273: "VSERVER",
        274: "MBIND",
        275: "GET_MEMPOLICY",
        276: "SET_MEMPOLICY",
        277: "MQ_OPEN",
        278: "MQ_UNLINK",
        279: "MQ_TIMEDSEND",
        280: "MQ_TIMEDRECEIVE",
        281: "MQ_NOTIFY",
        282: "MQ_GETSETATTR",
        283: "KEXEC_LOAD",
        284: "WAITID",
        286: "ADD_KEY",
        287: "REQUEST_KEY",
        288: "KEYCTL",
        289: "IOPRIO_SET",
        290: "IOPRIO_GET",
        291: "INOTIFY_INIT",
        292: "INOTIFY_ADD_WATCH",
        293: "INOTIFY_RM_WATCH",
        294: "MIGRATE_PAGES",
        295: "OPENAT",
        296: "MKDIRAT",
        297: "MKNODAT",
        298: "FCHOWNAT",
        299: "FUTIMESAT",
        300: "FSTATAT64",
        301: "UNLINKAT",
        302: "RENAMEAT",
        303: "LINKAT",
        304: "SYMLINKAT",
        305: "READLINKAT",
        306: "FCHMODAT",
        307: "FACCESSAT",
        308: "PSELECT6",
        309: "PPOLL",
        310: "UNSHARE",
        311: "SET_ROBUST_LIST",
        312: "GET_ROBUST_LIST",
        313: "SPLICE",
        314: "SYNC_FILE_RANGE",
        315: "TEE",
        316: "VMSPLICE",
        317: "MOVE_PAGES",
        318: "GETCPU",
        319: "EPOLL_PWAIT",
        320: "UTIMENSAT",
        321: "SIGNALFD",
        322: "TIMERFD_CREATE",
        323: "EVENTFD",
        324: "FALLOCATE",
        325: "TIMERFD_SETTIME",
        326: "TIMERFD_GETTIME",
        327: "SIGNALFD4",
        328: "EVENTFD2",
        329: "EPOLL_CREATE1",
        330: "DUP3",
        331: "PIPE2",
        332: "INOTIFY_INIT1",
        333: "PREADV",
        334: "PWRITEV",
        335: "RT_TGSIGQUEUEINFO",
        336: "PERF_EVENT_OPEN",
        337: "RECVMMSG",
        338: "FANOTIFY_INIT",
        339: "FANOTIFY_MARK",
        340: "PRLIMIT64",
        341: "NAME_TO_HANDLE_AT",
        342: "OPEN_BY_HANDLE_AT",
        343: "CLOCK_ADJTIME",
        344: "SYNCFS",
        345: "SENDMMSG",
        346: "SETNS",
        347: "PROCESS_VM_READV",
        348: "PROCESS_VM_WRITEV",
        349: "KCMP",
        350: "FINIT_MODULE",
        351: "SCHED_SETATTR",
        352: "SCHED_GETATTR",
        353: "RENAMEAT2",
        354: "SECCOMP",
        355: "GETRANDOM",
        356: "MEMFD_CREATE",
        357: "BPF",
        358: "EXECVEAT",
    }
)