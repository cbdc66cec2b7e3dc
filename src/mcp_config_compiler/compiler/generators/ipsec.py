"""IPsec transform sets/proposals, IKE keychains and peers, IPsec policies."""
from typing import Optional

from ...config.schema import DeviceType, Vendor
from ...config.security import ACLsConfig, IPsecConfig, IPsecPolicy, ManualSAKeys
from ..fragment import CliBuilder, Fragment, unsupported


def _sa_protocol(config: IPsecConfig, policy: IPsecPolicy) -> str:
    """Protocol of the first transform set the policy references."""
    for ts in config.transform_sets:
        if ts.id in policy.transform_set_ids:
            return ts.protocol or "esp"
    return "esp"


def _manual_sa(proto: str, keys: Optional[ManualSAKeys], key_kw: str, out: CliBuilder) -> None:
    if keys is None:
        return
    out.add(f" sa spi inbound {proto} {keys.inbound_spi}")
    out.add(f" sa string-key inbound {proto} {key_kw}{keys.inbound_key}")
    out.add(f" sa spi outbound {proto} {keys.outbound_spi}")
    out.add(f" sa string-key outbound {proto} {key_kw}{keys.outbound_key}")


def _manual_sas(config: IPsecConfig, policy: IPsecPolicy, key_kw: str, out: CliBuilder) -> None:
    if policy.manual_sa is None:
        return
    protocol = _sa_protocol(config, policy)
    if protocol in ("esp", "ah-esp"):
        _manual_sa("esp", policy.manual_sa.esp, key_kw, out)
    if protocol in ("ah", "ah-esp"):
        _manual_sa("ah", policy.manual_sa.ah, key_kw, out)


def _policy_header(policy: IPsecPolicy, acls: ACLsConfig, out: CliBuilder) -> None:
    out.add(
        f"ipsec policy {policy.name} {policy.seq_number} {policy.mode}",
        f"Policy {policy.name} sequence {policy.seq_number} ({policy.mode}).",
    )
    acl = acls.find(policy.acl_id)
    if acl is not None:
        out.add(f" security acl {acl.number}", f"Traffic matched by ACL {acl.number} is protected.")


def _h3c(config: IPsecConfig, acls: ACLsConfig, out: CliBuilder) -> None:
    for ts in config.transform_sets:
        if not ts.name:
            continue
        out.blank()
        out.add(f"ipsec transform-set {ts.name}", f"Transform set {ts.name}.")
        if ts.protocol:
            out.add(f" protocol {ts.protocol}")
        if ts.encapsulation_mode and ts.encapsulation_mode != "auto":
            out.add(f" encapsulation-mode {ts.encapsulation_mode}")
        if ts.esp_encryption:
            out.add(f" esp encryption-algorithm {ts.esp_encryption}")
        if ts.esp_auth:
            out.add(f" esp authentication-algorithm {ts.esp_auth}")
        if ts.ah_auth:
            out.add(f" ah authentication-algorithm {ts.ah_auth}")
        out.add("quit")

    for kc in config.ike_keychains:
        if not kc.name:
            continue
        out.blank()
        out.add(f"ike keychain {kc.name}", f"IKE keychain {kc.name}.")
        for psk in kc.pre_shared_keys:
            if psk.address and psk.key:
                out.add(
                    f" pre-shared-key address {psk.address} {psk.mask or '0'} key simple {psk.key}",
                    f"Pre-shared key for peer {psk.address}.",
                )
        out.add("quit")

    for profile in config.ike_profiles:
        if not profile.name:
            continue
        out.blank()
        out.add(f"ike profile {profile.name}", f"IKE profile {profile.name}.")
        keychain = config.find_keychain(profile.keychain_id)
        if keychain is not None:
            out.add(f" keychain {keychain.name}")
        if profile.local_identity:
            out.add(f" local-identity {profile.local_identity}")
        if profile.match_remote_address:
            out.add(f" match remote identity address {profile.match_remote_address}")
        out.add("quit")

    for policy in config.policies:
        if not (policy.name and policy.seq_number):
            continue
        out.blank()
        _policy_header(policy, acls, out)
        for ts_id in policy.transform_set_ids:
            ts = config.find_transform_set(ts_id)
            if ts is not None:
                out.add(f" transform-set {ts.name}")
        if policy.remote_address:
            out.add(f" remote-address {policy.remote_address}")
        if policy.local_address:
            out.add(f" local-address {policy.local_address}")
        if policy.mode == "isakmp":
            profile = config.find_profile(policy.ike_profile_id)
            if profile is not None:
                out.add(f" ike-profile {profile.name}")
        elif policy.mode == "manual":
            _manual_sas(config, policy, "simple ", out)
        out.add("quit")


def _huawei(config: IPsecConfig, acls: ACLsConfig, out: CliBuilder) -> None:
    for ts in config.transform_sets:
        if not ts.name:
            continue
        esp = ts.protocol in ("esp", "ah-esp")
        ah = ts.protocol in ("ah", "ah-esp")
        out.blank()
        out.add(f"ipsec proposal {ts.name}", f"IPsec proposal {ts.name}.")
        if ts.protocol:
            out.add(f" transform {ts.protocol}")
        if ts.encapsulation_mode and ts.encapsulation_mode != "auto":
            out.add(f" encapsulation-mode {ts.encapsulation_mode}")
        if esp and ts.esp_encryption:
            out.add(f" esp encryption-algorithm {ts.esp_encryption}")
        if esp and ts.esp_auth:
            out.add(f" esp authentication-algorithm {ts.esp_auth}")
        if ah and ts.ah_auth:
            out.add(f" ah authentication-algorithm {ts.ah_auth}")
        out.add("quit")

    # Huawei keychains carry keys only; the peer address lives on the ike peer
    for kc in config.ike_keychains:
        if not kc.name:
            continue
        out.blank()
        out.add(f"ike keychain {kc.name}", f"IKE keychain {kc.name}.")
        for psk in kc.pre_shared_keys:
            if psk.key:
                out.add(f" pre-shared-key key simple {psk.key}")
        out.add("quit")

    for profile in config.ike_profiles:
        if not profile.name:
            continue
        out.blank()
        out.add(f"ike peer {profile.name}", f"IKE peer {profile.name}.")
        keychain = config.find_keychain(profile.keychain_id)
        if keychain is not None:
            out.add(f" pre-shared-key keychain {keychain.name}")
        if profile.match_remote_address:
            out.add(f" remote-address {profile.match_remote_address.split()[0]}")
        identity = profile.local_identity.split()
        if len(identity) >= 2:
            out.add(f" local-id-type {identity[0]} {identity[1]}")
        out.add("quit")

    for policy in config.policies:
        if not (policy.name and policy.seq_number):
            continue
        out.blank()
        _policy_header(policy, acls, out)
        for ts_id in policy.transform_set_ids:
            ts = config.find_transform_set(ts_id)
            if ts is not None:
                out.add(f" proposal {ts.name}")
        if policy.mode == "isakmp":
            profile = config.find_profile(policy.ike_profile_id)
            if profile is not None:
                out.add(f" ike-peer {profile.name}")
            if policy.local_address:
                out.add(f" tunnel local {policy.local_address}")
        elif policy.mode == "manual":
            if policy.local_address:
                out.add(f" tunnel local {policy.local_address}")
            if policy.remote_address:
                out.add(f" tunnel remote {policy.remote_address}")
            _manual_sas(config, policy, "", out)
        out.add("quit")


def generate_ipsec(
    vendor: Vendor,
    device_type: DeviceType,
    config: IPsecConfig,
    acls: Optional[ACLsConfig] = None,
) -> Fragment:
    """
    Generate IPsec and IKE configuration.

    Policies reference ACLs, transform sets, keychains and profiles by id;
    a reference to a missing id omits that line.
    """
    if not config.enabled:
        return Fragment.empty("IPsec is disabled.")
    acls = acls or ACLsConfig()

    out = CliBuilder()
    if vendor == Vendor.H3C:
        _h3c(config, acls, out)
    elif vendor == Vendor.HUAWEI:
        _huawei(config, acls, out)
    else:
        return unsupported("IPsec", vendor)

    if not len(out):
        return Fragment.empty("No IPsec objects configured.")
    return out.build(f"{vendor.value} IPsec configuration generated.")
