import pytest

from dua.models import Node, NodeKind
from dua.utils import format_bytes, format_line


@pytest.mark.parametrize(
    "num, expected",
    [
        (0, "      0  b"),
        (1023, "   1023  b"),
        (1024, "   1.00 KB"),
        (1536, "   1.50 KB"),
        (1024 ** 2 - 1, "1024.00 KB"),
        (1024 ** 2, "   1.00 MB"),
        (5 * 1024 ** 3 + 512 * 1024 ** 2, "   5.50 GB"),
        (3 * 1024 ** 4, "   3.00 TB"),
        (7 * 1024 ** 5, "   7.00 PB"),
        (2048 * 1024 ** 5, "2048.00 PB"),
    ],
)
def test_format_bytes(num, expected):
    assert format_bytes(num) == expected


def test_format_line_uses_total_and_marker():
    node = Node(path="/a", kind=NodeKind.DIRECTORY, children=[
        Node(path="/a/big", kind=NodeKind.FILE, own_size=1000),
        Node(path="/a/more", kind=NodeKind.FILE, own_size=1048),
    ])
    assert format_line(node.children[0]) == "   1000  b [f] /a/big"
    assert format_line(node) == "   2.00 KB [d] /a"


@pytest.mark.parametrize(
    "kind, marker",
    [(NodeKind.OTHER, "?"), (NodeKind.UNKNOWN, " ")],
)
def test_format_line_markers(kind, marker):
    assert format_line(Node(path="/x", kind=kind)) == f"      0  b [{marker}] /x"
