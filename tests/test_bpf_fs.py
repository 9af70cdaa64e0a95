import pytest

from pulsar_agent.bpf.bpf_fs import (
    BPF_FS_PATH,
    BpfFsError,
    count_bpf_mounts,
    find_bpf_mount,
    parse_mountinfo,
    read_mountinfo,
)

EXT3_LINE = "36 35 98:0 /mnt1 /mnt2 rw,noatime master:1 - ext3 /dev/root rw,errors=continue"
BPF_LINE = "24 1 0:21 / /sys/fs/bpf rw,nosuid shared:9 - bpf bpf rw,mode=700"
BPF_BIND_LINE = "25 1 0:21 /sub /sys/fs/bpf rw - bpf bpf rw"
TMPFS_ON_BPF = "26 1 0:22 / /sys/fs/bpf rw - tmpfs tmpfs rw"


def test_parse_fields():
    (mount,) = parse_mountinfo(EXT3_LINE + "\n")
    assert mount.mount_id == 36
    assert mount.parent_id == 35
    assert mount.major_minor == "98:0"
    assert mount.root == "/mnt1"
    assert mount.mount_point == "/mnt2"
    assert mount.optional_fields == ("master:1",)
    assert mount.fs_type == "ext3"
    assert mount.mount_source == "/dev/root"
    assert mount.super_options == "rw,errors=continue"


def test_parse_no_optional_fields():
    (mount,) = parse_mountinfo(BPF_BIND_LINE)
    assert mount.optional_fields == ()
    assert mount.fs_type == "bpf"


def test_parse_escaped_path():
    (mount,) = parse_mountinfo("1 0 0:1 / /mnt/my\\040disk rw - ext4 /dev/sda rw")
    assert mount.mount_point == "/mnt/my disk"


def test_parse_malformed():
    with pytest.raises(BpfFsError):
        parse_mountinfo("36 35 98:0 /mnt1 /mnt2 rw")


def test_find_bpf_mount():
    mounts = parse_mountinfo("\n".join([EXT3_LINE, BPF_LINE]))
    found = find_bpf_mount(mounts)
    assert found.mount_point == BPF_FS_PATH
    assert found.mount_id == 24


def test_find_bpf_mount_absent():
    assert find_bpf_mount(parse_mountinfo(EXT3_LINE)) is None


def test_find_bpf_mount_wrong_type():
    with pytest.raises(BpfFsError):
        find_bpf_mount(parse_mountinfo(TMPFS_ON_BPF))


def test_count_bpf_mounts():
    assert count_bpf_mounts(parse_mountinfo(BPF_LINE)) == 1
    assert count_bpf_mounts(parse_mountinfo("\n".join([BPF_LINE, BPF_LINE]))) == 2
    assert count_bpf_mounts(parse_mountinfo("\n".join([BPF_LINE, BPF_BIND_LINE]))) == 1
    assert count_bpf_mounts(parse_mountinfo(EXT3_LINE)) == 0


def test_read_mountinfo(tmp_path):
    path = tmp_path / "mountinfo"
    path.write_text(f"{EXT3_LINE}\n{BPF_LINE}\n")
    mounts = read_mountinfo(path)
    assert [m.mount_id for m in mounts] == [36, 24]


def test_read_mountinfo_missing(tmp_path):
    with pytest.raises(BpfFsError):
        read_mountinfo(tmp_path / "absent")