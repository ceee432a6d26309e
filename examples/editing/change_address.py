"""Edit one stanza in place: only that stanza is regenerated."""

from ifupdown_interfaces import parse
from ifupdown_interfaces.tracking import changed_blocks

original = """\
auto eth0
iface eth0 inet static
\taddress 10.0.0.2/24
\tgateway 10.0.0.1

auto eth1
iface eth1 inet dhcp"""

doc = parse(original)

eth0 = doc.find_interface("eth0")
for setting in eth0.settings:
    if setting.key == "address":
        setting.value = "10.0.0.3/24"

print("Regenerated blocks:", [type(b).__name__ for b in changed_blocks(doc.blocks)])
print()
print(doc.serialize())
