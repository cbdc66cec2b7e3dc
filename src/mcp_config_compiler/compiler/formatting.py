"""Vendor dialect helpers shared by the feature generators.

VLAN list parsing and rendering, port range expansion, MAC and IP
encodings, and the per-vendor sub-mode closer.
"""
import re

from ..config.schema import Vendor

MIN_VLAN = 1
MAX_VLAN = 4094


def closer(vendor: Vendor) -> str:
    """Command that leaves a configuration sub-mode."""
    return "quit" if vendor in (Vendor.HUAWEI, Vendor.H3C) else "exit"


def parse_vlan_string(text: str) -> list[int]:
    """
    Parse a VLAN list such as "10,20-22" into sorted unique ids.

    Tokens are separated by commas or whitespace; "a-b" and "a to b" are
    ranges. Malformed tokens and ids outside 1-4094 are skipped.
    """
    if not text:
        return []

    normalized = re.sub(r"\s+to\s+", "-", str(text).strip())
    vlans: set[int] = set()
    for token in re.split(r"[,\s]+", normalized):
        if not token:
            continue
        if "-" in token:
            parts = token.split("-")
            if len(parts) != 2 or not parts[0].isdigit() or not parts[1].isdigit():
                continue
            start, end = int(parts[0]), int(parts[1])
            if start > end:
                continue
            vlans.update(v for v in range(start, end + 1) if MIN_VLAN <= v <= MAX_VLAN)
        elif token.isdigit() and MIN_VLAN <= int(token) <= MAX_VLAN:
            vlans.add(int(token))
    return sorted(vlans)


def contiguous_runs(ids: list[int]) -> list[tuple[int, int]]:
    """Split ids into maximal runs of consecutive integers."""
    runs: list[tuple[int, int]] = []
    for vid in sorted(set(ids)):
        if runs and vid == runs[-1][1] + 1:
            runs[-1] = (runs[-1][0], vid)
        else:
            runs.append((vid, vid))
    return runs


def _render_runs(ids: list[int], range_fmt: str) -> list[str]:
    parts: list[str] = []
    for start, end in contiguous_runs(ids):
        if start == end:
            parts.append(str(start))
        elif end == start + 1:
            parts.extend([str(start), str(end)])
        else:
            parts.append(range_fmt.format(start=start, end=end))
    return parts


def cisco_vlan_list(ids: list[int]) -> str:
    """Render ids as "10,11,20-30" (pairs listed, runs of 3+ dashed)."""
    return ",".join(_render_runs(ids, "{start}-{end}"))


def to_vlan_list(ids: list[int]) -> str:
    """Render ids as "10 11 20 to 30" for Huawei/H3C list arguments."""
    return " ".join(_render_runs(ids, "{start} to {end}"))


def vrp_vlan_list(raw: str) -> str:
    """Normalize a user-entered VLAN list to "10 20 to 30" ('' when no id is valid)."""
    return to_vlan_list(parse_vlan_string(raw))


def to_range_syntax(raw: str) -> str:
    """Rewrite a user-entered "10,20-30" list as "10 20 to 30"."""
    if not raw:
        return ""
    text = raw.replace(",", " ").replace("-", " to ")
    return " ".join(text.split())


def parse_port_range(text: str) -> list[int]:
    """Parse port numbers such as "2-4,7"; malformed tokens are skipped."""
    if not text:
        return []
    numbers: set[int] = set()
    for token in str(text).split(","):
        token = token.strip()
        if "-" in token:
            parts = [p.strip() for p in token.split("-")]
            if len(parts) == 2 and parts[0].isdigit() and parts[1].isdigit():
                numbers.update(range(int(parts[0]), int(parts[1]) + 1))
        elif token.isdigit():
            numbers.add(int(token))
    return sorted(numbers)


def port_base(port_name: str) -> str:
    """Port name without its last number ("Gi1/0/3" -> "Gi1/0/")."""
    slash = port_name.rfind("/")
    if slash == -1:
        return re.sub(r"\d+$", "", port_name)
    return port_name[: slash + 1]


def ip_to_hex(ip: str, upper: bool = False) -> str:
    """Encode a dotted IPv4 address as hex octets in network order ('' if invalid)."""
    if not ip:
        return ""
    octets = ip.strip().split(".")
    if len(octets) != 4:
        return ""
    out = []
    for octet in octets:
        if not octet.isdigit() or int(octet) > 255:
            return ""
        out.append(f"{int(octet):02x}")
    encoded = "".join(out)
    return encoded.upper() if upper else encoded


def clean_mac(mac: str) -> str:
    """Strip ':', '.' and '-' separators from a MAC address."""
    return re.sub(r"[:.\-]", "", mac or "")


def format_mac_dashed(mac: str) -> str:
    """Normalize to xxxx-xxxx-xxxx; non-standard input is returned as-is."""
    cleaned = clean_mac(mac)
    if len(cleaned) != 12:
        return mac
    return "-".join(cleaned[i:i + 4] for i in range(0, 12, 4))


def cisco_client_identifier(mac: str) -> str:
    """Ethernet client-id: '01' + MAC, dotted in groups of four."""
    raw = "01" + clean_mac(mac).lower()
    return ".".join(raw[i:i + 4] for i in range(0, len(raw), 4))


def is_default(value: str, default: str) -> bool:
    """True when a field is unset or equal to the vendor default."""
    return not value or str(value) == default
