"""Append a bridge to an interfaces file; existing stanzas stay byte for byte."""

from ifupdown_interfaces import Setting, parse

original = """\
auto lo
iface lo inet loopback

iface eno1 inet manual
"""

doc = parse(original)
doc.add_single_line("auto", ["vmbr5"])
doc.add_interface(
    "vmbr5",
    ["inet", "manual"],
    [
        Setting("address", "1.1.1.1/24"),
        Setting("bridge-ports", "eno1"),
    ],
)
print(doc.serialize())
