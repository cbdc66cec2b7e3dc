"""Firewall security zones and interzone security policies."""
from ...config.schema import DeviceType, Vendor
from ...config.security import SecurityConfig, SecurityPolicyRule
from ..fragment import CliBuilder, Fragment, unsupported


def parse_address(address: str, vendor: Vendor) -> str:
    """
    Convert a free-form policy address to the vendor's argument syntax.

    Accepts "a-b" ranges, "ip/len", "ip mask" and bare hosts. H3C results
    are suffixes of `source-ip-` / `destination-ip-`.
    """
    text = (address or "").strip()
    if not text:
        return ""
    if "-" in text:
        parts = text.split("-")
        if len(parts) == 2:
            return f"range {parts[0].strip()} {parts[1].strip()}"
    if "/" in text:
        ip, mask = text.split("/", 1)
        return f"subnet {ip} {mask}" if vendor == Vendor.H3C else f"{ip} {mask}"
    if " " in text:
        if vendor == Vendor.H3C:
            ip, mask = text.split(None, 1)
            return f"subnet {ip} {mask}"
        return text
    return f"host {text}" if vendor == Vendor.H3C else f"{text} 32"


def _zones(vendor: Vendor, config: SecurityConfig) -> CliBuilder:
    out = CliBuilder()
    for zone in config.zones:
        if not zone.name:
            continue
        out.blank()
        if vendor == Vendor.HUAWEI:
            out.add(f"firewall zone name {zone.name}", f"Creates security zone {zone.name}.")
            if zone.priority:
                out.add(f" set priority {zone.priority}", "Higher priority means more trusted.")
        else:
            out.add(f"security-zone name {zone.name}", f"Creates security zone {zone.name}.")
        if zone.description:
            out.add(f' description "{zone.description}"')
        keyword = "add" if vendor == Vendor.HUAWEI else "import"
        for member in zone.members:
            if member.interface_name:
                out.add(f" {keyword} interface {member.interface_name}", f"Places {member.interface_name} in {zone.name}.")
        out.add("quit")
    return out


def _huawei_rule(rule: SecurityPolicyRule, out: CliBuilder) -> None:
    if rule.source_address_type == "group" and rule.source_address_value:
        out.add(f"  source-address address-set {rule.source_address_value}")
    elif rule.source_address_type == "custom" and rule.source_address_value:
        out.add(f"  source-address {parse_address(rule.source_address_value, Vendor.HUAWEI)}")
    if rule.destination_address_type == "group" and rule.destination_address_value:
        out.add(f"  destination-address address-set {rule.destination_address_value}")
    elif rule.destination_address_type == "custom" and rule.destination_address_value:
        out.add(f"  destination-address {parse_address(rule.destination_address_value, Vendor.HUAWEI)}")
    if rule.service_type == "group" and rule.service_value:
        out.add(f"  service service-set {rule.service_value}")
    elif rule.service_type == "custom" and rule.service_value:
        out.add(f"  service {rule.service_value}")
    if rule.time_range:
        out.add(f"  time-range {rule.time_range}")
    if rule.action:
        out.add(f"  action {rule.action}")


def _h3c_rule(rule: SecurityPolicyRule, out: CliBuilder) -> None:
    if rule.source_address_type == "group" and rule.source_address_value:
        out.add(f"  source-ip object-group-name {rule.source_address_value}")
    elif rule.source_address_type == "custom" and rule.source_address_value:
        out.add(f"  source-ip-{parse_address(rule.source_address_value, Vendor.H3C)}")
    if rule.destination_address_type == "group" and rule.destination_address_value:
        out.add(f"  destination-ip object-group-name {rule.destination_address_value}")
    elif rule.destination_address_type == "custom" and rule.destination_address_value:
        out.add(f"  destination-ip-{parse_address(rule.destination_address_value, Vendor.H3C)}")
    if rule.service_type == "group" and rule.service_value:
        out.add(f"  service object-group-name {rule.service_value}")
    elif rule.service_type == "custom" and rule.service_value:
        out.add(f"  service {rule.service_value}")
    if rule.time_range:
        out.add(f"  time-range {rule.time_range}")
    if rule.logging:
        out.add("  logging enable")
    if rule.counting:
        out.add("  counting enable")
    out.add(f"  action {'pass' if rule.action == 'permit' else 'drop'}")


def _policies(vendor: Vendor, config: SecurityConfig) -> CliBuilder:
    out = CliBuilder()
    rules = [r for r in config.policies if r.enabled and (r.name or r.id)]
    if vendor == Vendor.H3C:
        out.add("undo security-policy disable", "Turns on security-policy based filtering.")
    if not rules:
        return out

    out.blank()
    out.add("security-policy" if vendor == Vendor.HUAWEI else "security-policy ip")
    for rule in rules:
        name = rule.name or rule.id
        out.add(f" rule name {name}", f"Policy rule {name}: {rule.source_zone or 'any'} -> {rule.destination_zone or 'any'}.")
        if rule.description:
            out.add(f'  description "{rule.description}"')
        if rule.source_zone:
            out.add(f"  source-zone {rule.source_zone}")
        if rule.destination_zone:
            out.add(f"  destination-zone {rule.destination_zone}")
        if vendor == Vendor.HUAWEI:
            _huawei_rule(rule, out)
        else:
            _h3c_rule(rule, out)
    out.add("quit")
    return out


def generate_security(vendor: Vendor, device_type: DeviceType, config: SecurityConfig) -> Fragment:
    """Generate security zones, then policy rules; disabled policies are skipped."""
    if not (config.zones_enabled or config.policies_enabled):
        return Fragment.empty("Security zones and policies are disabled.")
    if vendor not in (Vendor.HUAWEI, Vendor.H3C):
        return unsupported("Security zones and policies", vendor)

    out = CliBuilder()
    if config.zones_enabled:
        out.extend(_zones(vendor, config))
    if config.policies_enabled:
        out.blank()
        out.extend(_policies(vendor, config))

    if not len(out):
        return Fragment.empty("No zones or enabled policies configured.")
    return out.build("Security Zone and Policy configuration generated.")
