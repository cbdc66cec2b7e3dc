"""Tests for the security-side generators."""
import pytest

from mcp_config_compiler.compiler.generators import (
    generate_acl,
    generate_ha,
    generate_ipsec,
    generate_nat,
    generate_object_groups,
    generate_security,
    generate_time_ranges,
)
from mcp_config_compiler.compiler.generators.security import parse_address
from mcp_config_compiler.config import DeviceType, Vendor
from mcp_config_compiler.config.security import (
    ACL,
    ACLRule,
    ACLsConfig,
    AbsoluteTime,
    AddressGroup,
    AddressMember,
    AddressPoolSettings,
    ControlChannel,
    DaySelection,
    DomainGroup,
    DomainMember,
    GlobalPolicySettings,
    H3CGlobalNatRule,
    H3CHA,
    H3CNat,
    HAConfig,
    HAMonitoring,
    HeartbeatInterface,
    HuaweiHA,
    HuaweiNat,
    HuaweiNATAddressPool,
    HuaweiNATRule,
    HuaweiNATServer,
    HuaweiPoolSection,
    IKEKeychain,
    IKEProfile,
    IPsecConfig,
    IPsecPolicy,
    ManualSA,
    ManualSAKeys,
    NATAddressPool,
    NATConfig,
    NATPortMappingRule,
    NATStaticRule,
    ObjectGroupConfig,
    PeriodicTime,
    PortMappingSettings,
    PresharedKey,
    SecurityConfig,
    SecurityPolicyRule,
    SecurityZone,
    SecurityZoneMember,
    ServiceGroup,
    ServiceMember,
    StaticNATSettings,
    TimeRange,
    TrackItem,
    TransformSet,
)

WEB_RULE = dict(
    protocol="tcp",
    source_address="10.0.0.0",
    source_wildcard="0.0.0.255",
    destination_is_any=True,
    destination_port_operator="eq",
    destination_port1="80",
)


@pytest.fixture
def acls():
    return ACLsConfig(enabled=True, acls=[ACL(number="3000", id="acl-1")])


def acl_config(**acl_fields):
    rules = acl_fields.pop("rules", [ACLRule(**WEB_RULE)])
    return ACLsConfig(enabled=True, acls=[ACL(rules=rules, **acl_fields)])


def working_hours(**day_flags):
    days = DaySelection(**day_flags) if day_flags else DaySelection(
        monday=True, tuesday=True, wednesday=True, thursday=True, friday=True,
    )
    return TimeRange(name="WORK", periodic=PeriodicTime(enabled=True, start_time="08:00", end_time="18:00", days=days))


def year_2025(from_date="2025-01-01"):
    return TimeRange(name="YEAR", absolute=AbsoluteTime(
        enabled=True, from_time="08:00", from_date=from_date, to_time="18:00", to_date="2025-12-31",
    ))


class TestACL:
    """Tests for generate_acl."""

    def test_h3c_numbered(self):
        """H3C numbered ACLs carry their match order."""
        frag = generate_acl(Vendor.H3C, DeviceType.FIREWALL, acl_config(number="3000"))

        assert frag.cli.splitlines() == [
            "acl number 3000 match-order config",
            " rule permit tcp source 10.0.0.0 0.0.0.255 destination any destination-port eq 80",
            "quit",
        ]

    def test_h3c_named(self):
        """H3C ACLs without a number are declared by name."""
        frag = generate_acl(Vendor.H3C, DeviceType.FIREWALL, acl_config(name="WEB"))

        assert frag.cli.splitlines()[0] == "acl advanced name WEB match-order config"

    def test_huawei_numbered(self):
        """Huawei numbered ACLs use the short header."""
        frag = generate_acl(Vendor.HUAWEI, DeviceType.FIREWALL, acl_config(number="3000"))

        assert frag.cli.splitlines() == [
            "acl 3000",
            " rule permit tcp source 10.0.0.0 0.0.0.255 destination any destination-port eq 80",
            "quit",
        ]

    def test_huawei_named_default_protocol(self):
        """Huawei advanced rules default to protocol ip."""
        config = acl_config(name="ANY", rules=[ACLRule(source_is_any=True)])

        frag = generate_acl(Vendor.HUAWEI, DeviceType.FIREWALL, config)

        assert frag.cli.splitlines() == ["acl name ANY advance", " rule permit ip source any", "quit"]

    def test_cisco_extended(self):
        """Cisco extended lists put ports after each address."""
        frag = generate_acl(Vendor.CISCO, DeviceType.ROUTER, acl_config(name="WEB"))

        assert frag.cli.splitlines() == [
            "ip access-list extended WEB",
            " permit tcp 10.0.0.0 0.0.0.255 any eq 80",
            "exit",
        ]

    def test_cisco_standard_host(self):
        """A basic ACL is standard and a zero wildcard is a host."""
        config = acl_config(number="10", type="basic", rules=[ACLRule(action="deny", source_address="10.0.0.5")])

        frag = generate_acl(Vendor.CISCO, DeviceType.ROUTER, config)

        assert frag.cli.splitlines() == ["ip access-list standard 10", " deny host 10.0.0.5", "exit"]

    def test_explicit_rule_id(self):
        """Rule ids are emitted only when automatic numbering is off."""
        config = acl_config(number="3000", rules=[
            ACLRule(rule_id="5", auto_rule_id=False, source_is_any=True, protocol="ip", destination_is_any=True),
            ACLRule(rule_id="10", source_is_any=True, protocol="ip", destination_is_any=True),
        ])

        frag = generate_acl(Vendor.H3C, DeviceType.FIREWALL, config)

        assert frag.cli.splitlines()[1:3] == [
            " rule 5 permit ip source any destination any",
            " rule permit ip source any destination any",
        ]

    def test_acls_separated(self):
        """Each ACL is its own block."""
        config = ACLsConfig(enabled=True, acls=[
            ACL(number="2000", type="basic", rules=[ACLRule(source_is_any=True)]),
            ACL(number="3000", rules=[ACLRule(**WEB_RULE)]),
        ])

        frag = generate_acl(Vendor.H3C, DeviceType.FIREWALL, config)

        lines = frag.cli.splitlines()
        assert lines[:4] == ["acl number 2000 match-order config", " rule permit source any", "quit", ""]
        assert lines[4] == "acl number 3000 match-order config"

    def test_unnamed_acl_skipped(self):
        """ACLs without a number or name render nothing."""
        frag = generate_acl(Vendor.H3C, DeviceType.FIREWALL, acl_config())

        assert frag.is_empty

    def test_disabled(self):
        """Disabled ACLs give an empty fragment."""
        config = acl_config(number="3000")
        config.enabled = False

        assert generate_acl(Vendor.H3C, DeviceType.FIREWALL, config).is_empty

    def test_generic_unsupported(self):
        """Generic vendor gets a single comment line."""
        frag = generate_acl(Vendor.GENERIC, DeviceType.FIREWALL, acl_config(number="3000"))

        assert frag.cli == "# ACL for Generic is not supported."


class TestTimeRanges:
    """Tests for generate_time_ranges."""

    @pytest.mark.parametrize("vendor", [Vendor.HUAWEI, Vendor.H3C])
    def test_vrp_working_day(self, vendor):
        """Monday to Friday is a working-day range on one line."""
        frag = generate_time_ranges(vendor, DeviceType.FIREWALL, [working_hours()])

        assert frag.cli == "time-range WORK 08:00 to 18:00 working-day"

    def test_cisco_weekdays(self):
        """Cisco puts a periodic range in its own block."""
        frag = generate_time_ranges(Vendor.CISCO, DeviceType.ROUTER, [working_hours()])

        assert frag.cli.splitlines() == ["time-range WORK", " periodic weekdays 08:00 to 18:00", "exit"]

    @pytest.mark.parametrize("vendor,days", [
        (Vendor.H3C, "mon wed"),
        (Vendor.HUAWEI, "Mon Wed"),
    ])
    def test_vrp_day_names(self, vendor, days):
        """Individual days use the vendor's abbreviation."""
        frag = generate_time_ranges(vendor, DeviceType.FIREWALL, [working_hours(monday=True, wednesday=True)])

        assert frag.cli == f"time-range WORK 08:00 to 18:00 {days}"

    def test_cisco_day_names(self):
        """Cisco spells individual days out."""
        frag = generate_time_ranges(Vendor.CISCO, DeviceType.ROUTER, [working_hours(monday=True, wednesday=True)])

        assert " periodic Monday Wednesday 08:00 to 18:00" in frag.cli.splitlines()

    def test_vrp_absolute(self):
        """Absolute ranges use slashed dates."""
        frag = generate_time_ranges(Vendor.H3C, DeviceType.FIREWALL, [year_2025()])

        assert frag.cli == "time-range YEAR from 08:00 2025/01/01 to 18:00 2025/12/31"

    def test_cisco_absolute(self):
        """Cisco spells the month of absolute dates."""
        frag = generate_time_ranges(Vendor.CISCO, DeviceType.ROUTER, [year_2025()])

        assert " absolute start 08:00 01 January 2025 end 18:00 31 December 2025" in frag.cli.splitlines()

    def test_cisco_malformed_date_dropped(self):
        """A malformed start date drops only the start clause."""
        frag = generate_time_ranges(Vendor.CISCO, DeviceType.ROUTER, [year_2025(from_date="2025-13-45")])

        assert " absolute end 18:00 31 December 2025" in frag.cli.splitlines()

    def test_range_without_time_skipped(self):
        """Ranges with no periodic or absolute part render nothing."""
        frag = generate_time_ranges(Vendor.H3C, DeviceType.FIREWALL, [TimeRange(name="EMPTY")])

        assert frag.is_empty

    def test_none(self):
        """No time ranges is empty."""
        assert generate_time_ranges(Vendor.H3C, DeviceType.FIREWALL, []).is_empty


class TestSecurity:
    """Tests for generate_security."""

    def zones(self, name):
        return SecurityConfig(zones_enabled=True, zones=[SecurityZone(
            name=name, priority="85", members=[SecurityZoneMember(interface_name="GigabitEthernet1/0/1")],
        )])

    def policies(self, **rule_fields):
        rule = SecurityPolicyRule(
            name="R1",
            source_zone="trust",
            destination_zone="untrust",
            source_address_type="custom",
            source_address_value="10.0.0.0/24",
            **rule_fields,
        )
        return SecurityConfig(policies_enabled=True, policies=[rule])

    def test_huawei_zone(self):
        """Huawei zones carry a priority and add interfaces."""
        frag = generate_security(Vendor.HUAWEI, DeviceType.FIREWALL, self.zones("trust"))

        assert frag.cli.splitlines() == [
            "firewall zone name trust",
            " set priority 85",
            " add interface GigabitEthernet1/0/1",
            "quit",
        ]

    def test_h3c_zone(self):
        """H3C zones import interfaces and have no priority."""
        frag = generate_security(Vendor.H3C, DeviceType.FIREWALL, self.zones("Trust"))

        assert frag.cli.splitlines() == [
            "security-zone name Trust",
            " import interface GigabitEthernet1/0/1",
            "quit",
        ]

    def test_huawei_policy(self):
        """Huawei policies use address masks and permit."""
        frag = generate_security(Vendor.HUAWEI, DeviceType.FIREWALL, self.policies())

        assert frag.cli.splitlines() == [
            "security-policy",
            " rule name R1",
            "  source-zone trust",
            "  destination-zone untrust",
            "  source-address 10.0.0.0 24",
            "  action permit",
            "quit",
        ]

    def test_h3c_policy(self):
        """H3C enables policy filtering and maps permit to pass."""
        frag = generate_security(Vendor.H3C, DeviceType.FIREWALL, self.policies(logging=True))

        assert frag.cli.splitlines() == [
            "undo security-policy disable",
            "",
            "security-policy ip",
            " rule name R1",
            "  source-zone trust",
            "  destination-zone untrust",
            "  source-ip-subnet 10.0.0.0 24",
            "  logging enable",
            "  action pass",
            "quit",
        ]

    def test_h3c_deny_is_drop(self):
        """H3C renders deny as drop."""
        frag = generate_security(Vendor.H3C, DeviceType.FIREWALL, self.policies(action="deny"))

        assert "  action drop" in frag.cli.splitlines()

    def test_disabled_rule_skipped(self):
        """Disabled rules are left out."""
        frag = generate_security(Vendor.HUAWEI, DeviceType.FIREWALL, self.policies(enabled=False))

        assert frag.is_empty

    def test_cisco_unsupported(self):
        """Cisco gets a single comment line."""
        frag = generate_security(Vendor.CISCO, DeviceType.FIREWALL, self.zones("trust"))

        assert frag.cli == "# Security zones and policies for Cisco is not supported."

    def test_disabled(self):
        """Neither zones nor policies enabled is empty."""
        assert generate_security(Vendor.H3C, DeviceType.FIREWALL, SecurityConfig()).is_empty

    @pytest.mark.parametrize("address,vendor,expected", [
        ("10.0.0.1-10.0.0.9", Vendor.H3C, "range 10.0.0.1 10.0.0.9"),
        ("10.0.0.0/24", Vendor.H3C, "subnet 10.0.0.0 24"),
        ("10.0.0.0/24", Vendor.HUAWEI, "10.0.0.0 24"),
        ("10.0.0.0 255.255.255.0", Vendor.H3C, "subnet 10.0.0.0 255.255.255.0"),
        ("10.0.0.0 255.255.255.0", Vendor.HUAWEI, "10.0.0.0 255.255.255.0"),
        ("10.0.0.1", Vendor.H3C, "host 10.0.0.1"),
        ("10.0.0.1", Vendor.HUAWEI, "10.0.0.1 32"),
        ("", Vendor.H3C, ""),
    ])
    def test_parse_address(self, address, vendor, expected):
        """Free-form addresses map to each vendor's syntax."""
        assert parse_address(address, vendor) == expected


class TestObjectGroups:
    """Tests for generate_object_groups."""

    def addresses(self):
        return ObjectGroupConfig(address_groups_enabled=True, address_groups=[AddressGroup(
            name="SERVERS",
            members=[AddressMember(address="10.0.0.10"), AddressMember(address="10.1.0.0", mask="255.255.0.0")],
        )])

    def services(self):
        return ObjectGroupConfig(service_groups_enabled=True, service_groups=[ServiceGroup(
            name="WEB",
            members=[ServiceMember(protocol="tcp", destination_port_operator="eq", destination_port1="443")],
        )])

    def domains(self):
        return ObjectGroupConfig(domain_groups_enabled=True, domain_groups=[DomainGroup(
            name="SITES", members=[DomainMember(name="example.com")],
        )])

    def test_h3c_addresses(self):
        """H3C numbers members and marks hosts."""
        frag = generate_object_groups(Vendor.H3C, DeviceType.FIREWALL, self.addresses())

        assert frag.cli.splitlines() == [
            "# Address Groups",
            "object-group ip address SERVERS",
            " 1 network host address 10.0.0.10",
            " 2 network subnet 10.1.0.0 255.255.0.0",
            "quit",
        ]

    def test_huawei_addresses(self):
        """Huawei address sets number members from zero."""
        frag = generate_object_groups(Vendor.HUAWEI, DeviceType.FIREWALL, self.addresses())

        assert frag.cli.splitlines() == [
            "# Address Groups",
            "ip address-set SERVERS type object",
            " address 0 10.0.0.10 mask 32",
            " address 1 10.1.0.0 mask 255.255.0.0",
            "quit",
        ]

    def test_cisco_addresses(self):
        """Cisco network groups use ! headers and exit."""
        frag = generate_object_groups(Vendor.CISCO, DeviceType.FIREWALL, self.addresses())

        assert frag.cli.splitlines() == [
            "! Address Groups",
            "object-group network SERVERS",
            " host 10.0.0.10",
            " 10.1.0.0 255.255.0.0",
            "exit",
        ]

    @pytest.mark.parametrize("vendor,line", [
        (Vendor.H3C, " 1 service tcp destination eq 443"),
        (Vendor.HUAWEI, " service 0 protocol tcp destination-port eq 443"),
        (Vendor.CISCO, " tcp eq 443"),
    ])
    def test_services(self, vendor, line):
        """Service members render the destination port per vendor."""
        frag = generate_object_groups(vendor, DeviceType.FIREWALL, self.services())

        assert line in frag.cli.splitlines()

    def test_h3c_domains_as_host_names(self):
        """H3C carries domains as host-name members of an address group."""
        frag = generate_object_groups(Vendor.H3C, DeviceType.FIREWALL, self.domains())

        assert frag.cli.splitlines()[1:3] == ["object-group ip address SITES", " 1 network host name example.com"]

    def test_huawei_domain_set(self):
        """Huawei has a dedicated domain set."""
        frag = generate_object_groups(Vendor.HUAWEI, DeviceType.FIREWALL, self.domains())

        assert frag.cli.splitlines()[1:3] == ["domain-set name SITES", " add domain example.com"]

    def test_cisco_domains_skipped(self):
        """Cisco has no domain groups; only a note remains."""
        frag = generate_object_groups(Vendor.CISCO, DeviceType.FIREWALL, self.domains())

        assert frag.is_empty

    def test_generic_unsupported(self):
        """Generic vendor gets a single comment line."""
        frag = generate_object_groups(Vendor.GENERIC, DeviceType.FIREWALL, self.addresses())

        assert frag.cli == "# Object Groups for Generic is not supported."


class TestIPsec:
    """Tests for generate_ipsec."""

    def make_config(self, **policy_fields):
        fields = dict(
            name="VPN",
            seq_number="10",
            acl_id="acl-1",
            transform_set_ids=["ts-1"],
            remote_address="2.2.2.2",
            ike_profile_id="pr-1",
            id="pol-1",
        )
        fields.update(policy_fields)
        return IPsecConfig(
            enabled=True,
            transform_sets=[TransformSet(name="TS1", esp_encryption="aes-cbc-128", esp_auth="sha1", id="ts-1")],
            ike_keychains=[IKEKeychain(name="KC1", id="kc-1", pre_shared_keys=[
                PresharedKey(address="2.2.2.2", mask="255.255.255.255", key="Key123"),
            ])],
            ike_profiles=[IKEProfile(
                name="PROF1", keychain_id="kc-1", match_remote_address="2.2.2.2 255.255.255.255", id="pr-1",
            )],
            policies=[IPsecPolicy(**fields)],
        )

    def test_h3c(self, acls):
        """H3C builds transform set, keychain, profile and policy in order."""
        frag = generate_ipsec(Vendor.H3C, DeviceType.ROUTER, self.make_config(), acls)

        lines = frag.cli.splitlines()
        assert lines[:6] == [
            "ipsec transform-set TS1",
            " protocol esp",
            " encapsulation-mode tunnel",
            " esp encryption-algorithm aes-cbc-128",
            " esp authentication-algorithm sha1",
            "quit",
        ]
        assert " pre-shared-key address 2.2.2.2 255.255.255.255 key simple Key123" in lines
        assert lines[lines.index("ike profile PROF1") + 1] == " keychain KC1"
        assert lines[-6:] == [
            "ipsec policy VPN 10 isakmp",
            " security acl 3000",
            " transform-set TS1",
            " remote-address 2.2.2.2",
            " ike-profile PROF1",
            "quit",
        ]

    def test_huawei(self, acls):
        """Huawei uses proposals and IKE peers."""
        frag = generate_ipsec(Vendor.HUAWEI, DeviceType.ROUTER, self.make_config(), acls)

        lines = frag.cli.splitlines()
        assert lines[0] == "ipsec proposal TS1"
        assert " transform esp" in lines
        assert " pre-shared-key key simple Key123" in lines
        peer = lines.index("ike peer PROF1")
        assert lines[peer + 1:peer + 3] == [" pre-shared-key keychain KC1", " remote-address 2.2.2.2"]
        assert lines[-5:] == [
            "ipsec policy VPN 10 isakmp",
            " security acl 3000",
            " proposal TS1",
            " ike-peer PROF1",
            "quit",
        ]

    def test_missing_references_omitted(self, acls):
        """Unknown ACL and transform set ids drop their lines."""
        config = self.make_config(acl_id="acl-gone", transform_set_ids=["ts-gone"])

        frag = generate_ipsec(Vendor.H3C, DeviceType.ROUTER, config, acls)

        policy = frag.cli.split("ipsec policy VPN 10 isakmp")[1]
        assert "security acl" not in policy
        assert "transform-set" not in policy
        assert " ike-profile PROF1" in policy

    def test_h3c_manual_sa(self):
        """Manual policies carry inbound and outbound ESP keys."""
        keys = ManualSAKeys(inbound_spi="1000", outbound_spi="2000", inbound_key="in-key", outbound_key="out-key")
        config = self.make_config(mode="manual", manual_sa=ManualSA(esp=keys))

        frag = generate_ipsec(Vendor.H3C, DeviceType.ROUTER, config)

        lines = frag.cli.splitlines()
        assert lines[-6:-1] == [
            " remote-address 2.2.2.2",
            " sa spi inbound esp 1000",
            " sa string-key inbound esp simple in-key",
            " sa spi outbound esp 2000",
            " sa string-key outbound esp simple out-key",
        ]

    def test_cisco_unsupported(self):
        """Cisco gets a single comment line."""
        frag = generate_ipsec(Vendor.CISCO, DeviceType.ROUTER, self.make_config())

        assert frag.cli == "# IPsec for Cisco is not supported."

    def test_no_objects(self):
        """Enabled without objects is empty."""
        assert generate_ipsec(Vendor.H3C, DeviceType.ROUTER, IPsecConfig(enabled=True)).is_empty


class TestH3CNat:
    """Tests for generate_nat with the H3C variant."""

    def test_pool_static_and_port_mapping(self, acls):
        """Pools, static rules and port mappings render in order."""
        nat = H3CNat(
            address_pool=AddressPoolSettings(enabled=True, pools=[
                NATAddressPool(group_id="1", start_address="1.1.1.10", end_address="1.1.1.20"),
            ]),
            static_outbound=StaticNATSettings(enabled=True, rules=[
                NATStaticRule(local_ip="192.168.1.10", global_ip="1.1.1.5", acl_id="acl-1"),
            ]),
            port_mapping=PortMappingSettings(enabled=True, rules=[NATPortMappingRule(
                interface_name="GigabitEthernet1/0/1",
                global_address="1.1.1.5",
                global_port="80",
                local_address="192.168.1.10",
                local_port="8080",
            )]),
        )

        frag = generate_nat(Vendor.H3C, DeviceType.FIREWALL, NATConfig(enabled=True, variant=nat), acls)

        lines = frag.cli.splitlines()
        assert lines[:4] == ["# NAT Address Pools", "nat address-group 1", " address 1.1.1.10 1.1.1.20", "quit"]
        assert "nat static outbound 192.168.1.10 1.1.1.5 acl 3000" in lines
        assert lines[-3:] == [
            "interface GigabitEthernet1/0/1",
            " nat server protocol tcp global 1.1.1.5 80 inside 192.168.1.10 8080",
            "quit",
        ]

    def test_static_inbound_order(self):
        """Inbound static rules put the global address first."""
        nat = H3CNat(static_outbound=StaticNATSettings(enabled=True, rules=[
            NATStaticRule(direction="inbound", local_ip="192.168.1.10", global_ip="1.1.1.5"),
            NATStaticRule(local_ip="192.168.1.11"),
        ]))

        frag = generate_nat(Vendor.H3C, DeviceType.FIREWALL, NATConfig(enabled=True, variant=nat))

        lines = frag.cli.splitlines()
        assert "nat static inbound 1.1.1.5 192.168.1.10" in lines
        assert not any("192.168.1.11" in line for line in lines)

    def test_load_balancing(self):
        """Load-balanced mappings point at a server group."""
        nat = H3CNat(port_mapping=PortMappingSettings(enabled=True, rules=[NATPortMappingRule(
            interface_name="GigabitEthernet1/0/1",
            mapping_type="load-balancing",
            global_address="1.1.1.5",
            global_port="80",
            server_group_id="1",
        )]))

        frag = generate_nat(Vendor.H3C, DeviceType.FIREWALL, NATConfig(enabled=True, variant=nat))

        assert " nat server protocol tcp global 1.1.1.5 80 inside server-group 1" in frag.cli.splitlines()

    @pytest.mark.parametrize("device_type,zoned", [
        (DeviceType.FIREWALL, True),
        (DeviceType.ROUTER, False),
    ])
    def test_global_policy_zones(self, device_type, zoned):
        """Routers leave zones out of global policy rules."""
        nat = H3CNat(global_policy=GlobalPolicySettings(enabled=True, rules=[H3CGlobalNatRule(
            name="OUT", source_zone="Trust", destination_zone="Untrust", snat_action="easy-ip",
        )]))

        frag = generate_nat(Vendor.H3C, device_type, NATConfig(enabled=True, variant=nat))

        lines = frag.cli.splitlines()
        assert lines[:3] == ["# Global NAT Policy", "nat global-policy", " rule name OUT"]
        assert "  action snat easy-ip" in lines
        assert ("  source-zone Trust" in lines) == zoned

    def test_nothing_configured(self):
        """An H3C variant without rules is empty."""
        frag = generate_nat(Vendor.H3C, DeviceType.FIREWALL, NATConfig(enabled=True, variant=H3CNat()))

        assert frag.is_empty


class TestHuaweiNat:
    """Tests for generate_nat with the Huawei variant."""

    def make_config(self):
        nat = HuaweiNat(
            address_pools=[HuaweiNATAddressPool(group_name="POOL1", sections=[
                HuaweiPoolSection(start_address="1.1.1.10", end_address="1.1.1.20"),
            ])],
            rules=[HuaweiNATRule(
                rule_name="R1", source_address="192.168.1.0", source_mask="24", nat_address_group="POOL1",
            )],
            servers=[HuaweiNATServer(
                name="WEB", zone="untrust", protocol="tcp", global_address="1.1.1.5", global_port="80",
                inside_host_address="192.168.1.10", inside_host_port="8080",
            )],
        )
        return NATConfig(enabled=True, variant=nat)

    def test_pool_and_policy(self):
        """Huawei pools feed the source NAT policy."""
        frag = generate_nat(Vendor.HUAWEI, DeviceType.FIREWALL, self.make_config())

        lines = frag.cli.splitlines()
        assert lines[:5] == [
            "# Source NAT Address Pools",
            "nat address-group POOL1",
            " section 1.1.1.10 1.1.1.20",
            " mode pat",
            "quit",
        ]
        policy = lines.index("nat-policy")
        assert lines[policy + 1:policy + 5] == [
            " rule name R1",
            "  source-address 192.168.1.0 24",
            "  action source-nat address-group POOL1",
            "quit",
        ]

    @pytest.mark.parametrize("device_type,zone", [
        (DeviceType.FIREWALL, " zone untrust"),
        (DeviceType.ROUTER, ""),
    ])
    def test_nat_server(self, device_type, zone):
        """Only firewalls bind a NAT server to a zone."""
        frag = generate_nat(Vendor.HUAWEI, device_type, self.make_config())

        expected = f"nat server name WEB{zone} protocol tcp global 1.1.1.5 80 inside 192.168.1.10 8080"
        assert frag.cli.splitlines()[-1] == expected

    def test_easy_ip(self):
        """Easy IP translates to the outgoing interface address."""
        config = NATConfig(enabled=True, variant=HuaweiNat(rules=[HuaweiNATRule(rule_name="R2", easy_ip=True)]))

        frag = generate_nat(Vendor.HUAWEI, DeviceType.FIREWALL, config)

        assert "  action source-nat easy-ip" in frag.cli.splitlines()

    def test_variant_mismatch(self):
        """A variant for another vendor is unsupported."""
        frag = generate_nat(Vendor.H3C, DeviceType.FIREWALL, self.make_config())

        assert frag.cli == "# NAT for H3C is not supported."

    def test_disabled(self):
        """Disabled NAT gives an empty fragment."""
        assert generate_nat(Vendor.HUAWEI, DeviceType.FIREWALL, NATConfig(variant=HuaweiNat())).is_empty


class TestHA:
    """Tests for generate_ha."""

    def h3c_config(self, **ha_fields):
        ha = H3CHA(control_channel=ControlChannel(local_ip="10.0.0.1", remote_ip="10.0.0.2"), **ha_fields)
        return HAConfig(enabled=True, variant=ha)

    def test_h3c_rbm(self):
        """H3C RBM defaults to active/standby with sync toggles off."""
        frag = generate_ha(Vendor.H3C, DeviceType.FIREWALL, self.h3c_config())

        assert frag.cli.splitlines() == [
            "remote-backup group",
            " device-role primary",
            " undo backup-mode",
            " local-ip 10.0.0.1",
            " remote-ip 10.0.0.2 port 1026",
            " undo hot-backup enable",
            " undo configuration auto-sync enable",
            " undo configuration sync-check",
            "quit",
        ]

    def test_h3c_dual_active(self):
        """Dual-active mode and hot backup are switched on explicitly."""
        frag = generate_ha(
            Vendor.H3C, DeviceType.FIREWALL, self.h3c_config(work_mode="dual-active", hot_backup_enabled=True),
        )

        lines = frag.cli.splitlines()
        assert " backup-mode dual-active" in lines
        assert " hot-backup enable" in lines

    def test_h3c_track(self):
        """Track items are declared first and referenced inside the group."""
        monitoring = HAMonitoring(type="track", track_items=[TrackItem(id="1", value="GigabitEthernet1/0/1")])

        frag = generate_ha(Vendor.H3C, DeviceType.FIREWALL, self.h3c_config(monitoring=monitoring))

        lines = frag.cli.splitlines()
        assert lines[:2] == ["track 1 interface GigabitEthernet1/0/1", "quit"]
        assert lines[-2:] == [" track 1", "quit"]

    def test_huawei_hrp(self):
        """Huawei HRP lists heartbeats and preemption, then enables HRP."""
        ha = HuaweiHA(heartbeat_interfaces=[
            HeartbeatInterface(interface_name="GigabitEthernet1/0/7", remote_ip="10.10.0.2"),
        ])

        frag = generate_ha(Vendor.HUAWEI, DeviceType.FIREWALL, HAConfig(enabled=True, variant=ha))

        assert frag.cli.splitlines() == [
            "# Heartbeat Interfaces",
            "hrp interface GigabitEthernet1/0/7 remote 10.10.0.2",
            "",
            "# Preemption",
            "hrp preempt enable",
            "",
            "hrp enable",
        ]

    def test_huawei_packet_priority(self):
        """HRP packet priority is sent as a byte value."""
        config = HAConfig(enabled=True, variant=HuaweiHA(ip_packet_priority="5"))

        frag = generate_ha(Vendor.HUAWEI, DeviceType.FIREWALL, config)

        assert "hrp ip-packet priority 160" in frag.cli.splitlines()

    def test_variant_mismatch(self):
        """A variant for another vendor is unsupported."""
        frag = generate_ha(Vendor.HUAWEI, DeviceType.FIREWALL, self.h3c_config())

        assert frag.cli == "# HA for Huawei is not supported."
