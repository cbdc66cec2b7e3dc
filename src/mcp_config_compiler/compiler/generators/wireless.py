"""Wireless controller configuration (H3C service templates, Huawei WLAN profiles)."""
from ...config.schema import DeviceType, Vendor
from ...config.services import APGroup, RadioConfig, WirelessConfig
from ..fragment import CliBuilder, Fragment, unsupported
from ..formatting import format_mac_dashed

DEFAULT_H3C_AP_MODEL = "WA6320-HCL"

H3C_SECURITY_IE = {
    "wpa": [" security-ie wpa", " cipher-suite tkip"],
    "wpa2": [" security-ie rsn", " cipher-suite ccmp"],
    "wpa-wpa2": [" security-ie wpa", " security-ie rsn", " cipher-suite tkip", " cipher-suite ccmp"],
}


def _h3c_templates(config: WirelessConfig, out: CliBuilder) -> None:
    for st in config.service_templates:
        if not st.template_name:
            continue
        out.blank()
        out.add(f'wlan service-template "{st.template_name}"', f"Service template for SSID {st.ssid}.")
        out.add(f' ssid "{st.ssid}"')
        if st.ssid_hide:
            out.add(" beacon ssid-hide", "The SSID is not broadcast.")
        if st.description:
            out.add(f' description "{st.description}"')
        if st.default_vlan:
            out.add(f" vlan {st.default_vlan}")
        if st.max_clients:
            out.add(f" client max-count {st.max_clients}")
        if st.auth_mode == "static-psk":
            out.add(" akm mode psk")
            if st.psk_password:
                psk_type = "raw-key" if st.psk_type == "rawkey" else "pass-phrase"
                out.add(f" preshared-key {psk_type} simple {st.psk_password}")
            for line in H3C_SECURITY_IE.get(st.security_mode, []):
                out.add(line)
        elif st.auth_mode == "static-wep":
            out.add(f" wep key {st.wep_key_id or '1'} {st.wep_key_type or 'passphrase'} simple {st.wep_password}")
        if st.enabled:
            out.add(" service-template enable")
        out.add("quit")


def _h3c_radio(radio_id: str, radio: RadioConfig, group: APGroup, config: WirelessConfig, out: CliBuilder) -> None:
    out.add(f"  radio {radio_id}")
    if radio.channel:
        out.add(f"   channel {radio.channel}")
    if radio.power:
        out.add(f"   max-power {radio.power}")
    templates = {st.template_name: st for st in config.service_templates}
    for name in group.service_templates:
        template = templates.get(name)
        if template is None:
            continue
        line = f'   service-template "{name}"'
        if template.default_vlan:
            line += f" vlan {template.default_vlan}"
        out.add(line, f"Radio {radio_id} serves template {name}.")
    out.add("   radio enable")
    out.add("  quit")


def _h3c(config: WirelessConfig, out: CliBuilder) -> None:
    _h3c_templates(config, out)

    for ap in config.ap_devices:
        if not (ap.serial_number and ap.ap_name):
            continue
        out.blank()
        out.add(f'wlan ap "{ap.ap_name}" model "{ap.model or DEFAULT_H3C_AP_MODEL}"', f"Pre-provisions AP {ap.ap_name}.")
        out.add(f" serial-id {ap.serial_number}")
        if ap.description:
            out.add(f' description "{ap.description}"')
        out.add("quit")

    for group in config.ap_groups:
        if not group.group_name:
            continue
        members = [ap for ap in config.ap_devices if ap.group_name == group.group_name and ap.ap_name]
        out.blank()
        out.add(f'wlan ap-group "{group.group_name}"', f"AP group {group.group_name}.")
        if group.description:
            out.add(f' description "{group.description}"')
        for ap in members:
            out.add(f' ap "{ap.ap_name}"')
        models = list(dict.fromkeys(ap.model for ap in members if ap.model))
        # radio 1 is 5 GHz, radio 2 is 2.4 GHz, set per AP model
        for model in models:
            out.add(f' ap-model "{model}"')
            if group.radio_5g.enabled:
                _h3c_radio("1", group.radio_5g, group, config, out)
            if group.radio_2g.enabled:
                _h3c_radio("2", group.radio_2g, group, config, out)
            out.add(" quit")
        out.add("quit")


def _huawei(config: WirelessConfig, out: CliBuilder) -> None:
    ac = config.ac_config
    out.add("wlan", "Enters the WLAN view.")
    if ac.ac_source_interface:
        out.add(f" ac-source interface {ac.ac_source_interface}", "CAPWAP source interface.")
    if ac.country_code:
        out.add(f" country-code {ac.country_code}")
    if ac.ap_auth_mode:
        out.add(f" ap auth-mode {ac.ap_auth_mode}-auth", f"APs are admitted by {ac.ap_auth_mode}.")

    for profile in config.security_profiles:
        if not profile.profile_name:
            continue
        out.add(f' security-profile name "{profile.profile_name}"')
        if profile.security_type == "wpa2-psk" and profile.psk:
            out.add(f"  security wpa2 psk pass-phrase {profile.psk} aes")
        out.add(" quit")

    for profile in config.ssid_profiles:
        if not profile.profile_name:
            continue
        out.add(f' ssid-profile name "{profile.profile_name}"')
        out.add(f'  ssid "{profile.ssid}"')
        out.add(" quit")

    for profile in config.vap_profiles:
        if not profile.profile_name:
            continue
        out.add(f' vap-profile name "{profile.profile_name}"', "Binds security, SSID and service VLAN.")
        if profile.security_profile:
            out.add(f'  security-profile "{profile.security_profile}"')
        if profile.ssid_profile:
            out.add(f'  ssid-profile "{profile.ssid_profile}"')
        if profile.vlan_id:
            out.add(f"  service-vlan vlan-id {profile.vlan_id}")
        if profile.forward_mode:
            out.add(f"  forward-mode {profile.forward_mode}")
        out.add(" quit")

    for group in config.ap_groups:
        if not group.group_name:
            continue
        out.add(f' ap-group name "{group.group_name}"')
        if group.description:
            out.add(f'  description "{group.description}"')
        for binding in group.vap_bindings:
            if binding.vap_profile_name:
                out.add(f'  vap-profile "{binding.vap_profile_name}" wlan 1 radio {binding.radio}')
        out.add(" quit")

    for index, ap in enumerate(ap for ap in config.ap_devices if ap.mac_address):
        out.add(f" ap-id {index} ap-mac {format_mac_dashed(ap.mac_address)}", f"Admits AP {ap.ap_name or ap.mac_address}.")
        if ap.ap_name:
            out.add(f'  ap-name "{ap.ap_name}"')
        if ap.group_name:
            out.add(f'  ap-group "{ap.group_name}"')
        out.add(" quit")

    out.add("quit")


def generate_wireless(vendor: Vendor, device_type: DeviceType, config: WirelessConfig) -> Fragment:
    """Generate AC-side wireless configuration."""
    if not config.enabled:
        return Fragment.empty("Wireless is disabled.")

    out = CliBuilder()
    if vendor == Vendor.H3C:
        _h3c(config, out)
    elif vendor == Vendor.HUAWEI:
        _huawei(config, out)
    else:
        return unsupported("Wireless", vendor)

    if not len(out):
        return Fragment.empty("No wireless objects configured.")
    return out.build("Wireless configuration generated locally.")
