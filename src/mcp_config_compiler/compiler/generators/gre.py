"""GRE tunnel interfaces."""
from ...config.schema import DeviceType, Vendor
from ...config.services import GRETunnel, GREVPNConfig
from ..fragment import CliBuilder, Fragment, unsupported


def _address(tunnel: GRETunnel, out: CliBuilder) -> None:
    if tunnel.ip_address and tunnel.mask:
        out.add(f" ip address {tunnel.ip_address} {tunnel.mask}")
    elif tunnel.ip_address_unnumbered_interface:
        out.add(
            f" ip address unnumbered interface {tunnel.ip_address_unnumbered_interface}",
            f"Borrows the address of {tunnel.ip_address_unnumbered_interface}.",
        )


def _huawei(tunnel: GRETunnel, device_type: DeviceType, out: CliBuilder) -> None:
    name = f"Tunnel{tunnel.tunnel_number}"
    out.add(f"interface {name}", f"Creates GRE tunnel {name}.")
    if tunnel.description:
        out.add(f" description {tunnel.description}")
    _address(tunnel, out)
    out.add(" tunnel-protocol gre")
    if tunnel.source_value:
        out.add(f" source {tunnel.source_value}")
    if tunnel.destination_address:
        out.add(f" destination {tunnel.destination_address}", f"Remote endpoint {tunnel.destination_address}.")
    if tunnel.mtu:
        out.add(f" mtu {tunnel.mtu}")
    if tunnel.gre_key:
        out.add(f" gre key {tunnel.gre_key}", "Both ends must use the same key.")
    if tunnel.keepalive.enabled:
        line = " keepalive"
        if tunnel.keepalive.period:
            line += f" period {tunnel.keepalive.period}"
        if tunnel.keepalive.retry_times:
            line += f" retry-times {tunnel.keepalive.retry_times}"
        out.add(line, "Detects a dead tunnel.")
    out.add("quit")

    # zone binding only exists on firewalls
    if tunnel.security_zone and device_type == DeviceType.FIREWALL:
        out.blank()
        out.add(f"firewall zone {tunnel.security_zone}")
        out.add(f" add interface {name}", f"Places {name} in zone {tunnel.security_zone}.")
        out.add("quit")


def _h3c(tunnel: GRETunnel, device_type: DeviceType, out: CliBuilder) -> None:
    name = f"Tunnel{tunnel.tunnel_number}"
    out.add(f"interface {name} mode gre", f"Creates GRE tunnel {name}.")
    if tunnel.description:
        out.add(f" description {tunnel.description}")
    _address(tunnel, out)
    if tunnel.source_value:
        out.add(f" source {tunnel.source_value}")
    if tunnel.destination_address:
        out.add(f" destination {tunnel.destination_address}", f"Remote endpoint {tunnel.destination_address}.")
    if tunnel.mtu:
        out.add(f" mtu {tunnel.mtu}")
    if tunnel.gre_key:
        out.add(f" gre key {tunnel.gre_key}", "Both ends must use the same key.")
    if tunnel.gre_checksum:
        out.add(" gre checksum")
    if tunnel.df_bit_enable:
        out.add(" tunnel dfbit enable", "Sets the DF bit on encapsulated packets.")
    if tunnel.keepalive.enabled:
        line = " keepalive"
        if tunnel.keepalive.period:
            line += f" {tunnel.keepalive.period}"
            if tunnel.keepalive.retry_times:
                line += f" {tunnel.keepalive.retry_times}"
        out.add(line, "Detects a dead tunnel.")
    out.add("quit")


def generate_gre(vendor: Vendor, device_type: DeviceType, config: GREVPNConfig) -> Fragment:
    """Generate one tunnel interface per numbered tunnel."""
    if not config.enabled or not config.tunnels:
        return Fragment.empty("GRE VPN is disabled or no tunnels are configured.")

    if vendor == Vendor.HUAWEI:
        render = _huawei
    elif vendor == Vendor.H3C:
        render = _h3c
    else:
        return unsupported("GRE VPN", vendor)

    out = CliBuilder()
    for tunnel in config.tunnels:
        if not tunnel.tunnel_number:
            continue
        out.blank()
        render(tunnel, device_type, out)

    if not len(out):
        return Fragment.empty("No numbered GRE tunnels configured.")
    return out.build("GRE VPN configuration generated.")
