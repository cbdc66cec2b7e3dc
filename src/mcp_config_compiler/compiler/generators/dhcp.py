"""DHCP server pools."""
import logging

from ...config.schema import DeviceType, Vendor
from ...config.services import DHCPConfig, DHCPPool
from ..fragment import CliBuilder, Fragment, unsupported
from ..formatting import cisco_client_identifier, clean_mac, format_mac_dashed, ip_to_hex

logger = logging.getLogger(__name__)

# Option 43 sub-option prefixes announcing one AC address
CISCO_OPTION43_PREFIX = "f104"
H3C_OPTION43_PREFIX = "8007000001"


def _lease(pool: DHCPPool, with_seconds: bool = False) -> list[str]:
    """Lease components, or [] when every part is zero."""
    parts = [pool.lease_days, pool.lease_hours, pool.lease_minutes]
    if with_seconds:
        parts.append(pool.lease_seconds)
    values = [p or "0" for p in parts]
    if all(v == "0" for v in values):
        return []
    return values


def _cisco(pools: list[DHCPPool], out: CliBuilder) -> None:
    out.add("service dhcp", "Enables the DHCP service.")
    for pool in pools:
        if pool.exclude_start and pool.exclude_end:
            out.add(
                f"ip dhcp excluded-address {pool.exclude_start} {pool.exclude_end}",
                "These addresses are never leased.",
            )
    for pool in pools:
        out.add(f"ip dhcp pool {pool.pool_name}", f"Creates pool {pool.pool_name}.")
        if pool.network and pool.subnet_mask:
            out.add(f" network {pool.network} {pool.subnet_mask}")
        if pool.gateway:
            out.add(f" default-router {pool.gateway}")
        if pool.dns_server:
            out.add(f" dns-server {pool.dns_server}")
        encoded = ip_to_hex(pool.option43)
        if encoded:
            out.add(f" option 43 hex {CISCO_OPTION43_PREFIX}{encoded}", f"Points APs to the AC at {pool.option43}.")
        elif pool.option43:
            logger.debug(f"Pool {pool.pool_name}: option 43 address {pool.option43!r} is not IPv4, skipped")
        lease = _lease(pool, with_seconds=True)
        if lease:
            out.add(f" lease {' '.join(lease)}", "Lease as days hours minutes seconds.")
        out.add("exit")

        for binding in pool.static_bindings:
            if not (binding.ip_address and binding.mac_address):
                continue
            out.add(f"ip dhcp pool STATIC_{clean_mac(binding.mac_address)}")
            out.add(f" host {binding.ip_address} {pool.subnet_mask}".rstrip())
            out.add(
                f" client-identifier {cisco_client_identifier(binding.mac_address)}",
                f"Reserves {binding.ip_address} for {binding.mac_address}.",
            )
            out.add("exit")


def _huawei(pools: list[DHCPPool], out: CliBuilder) -> None:
    out.add("dhcp enable", "Enables the DHCP service.")
    for pool in pools:
        out.add(f"ip pool {pool.pool_name}", f"Creates global pool {pool.pool_name}.")
        if pool.gateway:
            out.add(f" gateway-list {pool.gateway}")
        if pool.network and pool.subnet_mask:
            out.add(f" network {pool.network} mask {pool.subnet_mask}")
        if pool.dns_server:
            out.add(f" dns-list {pool.dns_server}")
        if pool.option43:
            out.add(f" option 43 sub-option 3 ascii {pool.option43}", f"Points APs to the AC at {pool.option43}.")
        if pool.exclude_start and pool.exclude_end:
            out.add(f" excluded-ip-address {pool.exclude_start} {pool.exclude_end}")
        lease = _lease(pool)
        if lease:
            out.add(f" lease day {lease[0]} hour {lease[1]} minute {lease[2]}")
        for binding in pool.static_bindings:
            if binding.ip_address and binding.mac_address:
                out.add(
                    f" static-bind ip-address {binding.ip_address} mac-address {format_mac_dashed(binding.mac_address)}",
                    f"Reserves {binding.ip_address} for {binding.mac_address}.",
                )
        out.add("quit")


def _h3c(pools: list[DHCPPool], out: CliBuilder) -> None:
    out.add("dhcp enable", "Enables the DHCP service.")
    for pool in pools:
        out.add(f"dhcp server ip-pool {pool.pool_name}", f"Creates pool {pool.pool_name}.")
        if pool.network and pool.subnet_mask:
            out.add(f" network {pool.network} mask {pool.subnet_mask}")
        if pool.gateway:
            out.add(f" gateway-list {pool.gateway}")
        if pool.dns_server:
            out.add(f" dns-list {pool.dns_server}")
        encoded = ip_to_hex(pool.option43, upper=True)
        if encoded:
            out.add(f" option 43 hex {H3C_OPTION43_PREFIX}{encoded}", f"Points APs to the AC at {pool.option43}.")
        if pool.exclude_start and pool.exclude_end:
            out.add(f" forbidden-ip {pool.exclude_start} {pool.exclude_end}")
        lease = _lease(pool)
        if lease:
            out.add(f" expired day {lease[0]} hour {lease[1]} minute {lease[2]}")
        for binding in pool.static_bindings:
            if binding.ip_address and binding.mac_address:
                out.add(
                    f" static-bind ip-address {binding.ip_address} mask {pool.subnet_mask} "
                    f"hardware-address {format_mac_dashed(binding.mac_address)}",
                    f"Reserves {binding.ip_address} for {binding.mac_address}.",
                )
        out.add("quit")


_RENDERERS = {
    Vendor.CISCO: _cisco,
    Vendor.HUAWEI: _huawei,
    Vendor.H3C: _h3c,
}


def generate_dhcp(vendor: Vendor, device_type: DeviceType, config: DHCPConfig) -> Fragment:
    """
    Generate DHCP server pools.

    Args:
        vendor: Node vendor
        device_type: Node device type
        config: DHCP server config; pools without a name are skipped

    Returns:
        Fragment; empty when DHCP is disabled or has no pools
    """
    pools = [pool for pool in config.pools if pool.pool_name]
    if not config.enabled or not pools:
        return Fragment.empty("DHCP server is disabled or has no pools.")

    render = _RENDERERS.get(vendor)
    if render is None:
        return unsupported("DHCP", vendor)

    out = CliBuilder()
    render(pools, out)
    return out.build("DHCP configuration generated locally.")
