"""SSH server, local users and vty lines."""
from ...config.schema import DeviceType, Vendor
from ...config.services import SSHConfig
from ..fragment import CliBuilder, Fragment, unsupported

CISCO_RSA_MODULUS = "2048"


def _h3c(config: SSHConfig, out: CliBuilder) -> None:
    out.add("ssh server enable", "Enables the SSH server.")
    for user in config.users:
        if not user.usable:
            continue
        out.blank()
        out.add(f"local-user {user.username} class manage", f"Creates management user {user.username}.")
        out.add(f" password simple {user.password}")
        out.add(" service-type ssh")
        out.add(" authorization-attribute user-role network-admin")
        out.add("quit")
    out.blank()
    out.add(f"line vty {config.vty_lines}")
    out.add(f" authentication-mode {config.authentication_mode}", "Authenticates vty logins.")
    out.add(" user-role network-admin")
    out.add(f" protocol inbound {config.protocol_inbound}", f"Accepts {config.protocol_inbound} logins.")
    out.add("quit")


def _huawei(config: SSHConfig, out: CliBuilder) -> None:
    users = [u for u in config.users if u.usable]
    out.add("stelnet server enable", "Enables the STelnet (SSH) server.")
    if config.source_interface:
        out.blank()
        out.add(f"ssh server-source -i {config.source_interface}", "Restricts SSH to this source interface.")
    out.blank()
    out.add("aaa")
    for user in users:
        out.add(
            f" local-user {user.username} password irreversible-cipher {user.password}",
            f"Creates local user {user.username}.",
        )
        out.add(f" local-user {user.username} service-type ssh")
        out.add(f" local-user {user.username} privilege level 15")
    out.add("quit")
    if users:
        out.blank()
    for user in users:
        out.add(f"ssh user {user.username} authentication-type password")
    out.blank()
    out.add(f"user-interface vty {config.vty_lines}")
    out.add(" authentication-mode aaa", "vty logins authenticate against AAA.")
    out.add(" user privilege level 15")
    out.add(f" protocol inbound {config.protocol_inbound}", f"Accepts {config.protocol_inbound} logins.")
    out.add("quit")


def _cisco(config: SSHConfig, out: CliBuilder) -> None:
    if config.domain_name:
        out.add(f"ip domain-name {config.domain_name}", "The RSA key is named after the domain.")
    out.add(f"crypto key generate rsa modulus {CISCO_RSA_MODULUS}", "Generates the host key.")
    out.add("ip ssh version 2", "Allows SSH version 2 only.")
    users = [u for u in config.users if u.usable]
    if users:
        out.blank()
    for user in users:
        out.add(f"username {user.username} privilege 15 secret {user.password}", f"Creates user {user.username}.")
    out.blank()
    out.add(f"line vty {config.vty_lines}")
    out.add(" login local", "Authenticates against local users.")
    out.add(f" transport input {config.protocol_inbound}", f"Accepts {config.protocol_inbound} logins.")
    out.add("exit")


_RENDERERS = {
    Vendor.CISCO: _cisco,
    Vendor.HUAWEI: _huawei,
    Vendor.H3C: _h3c,
}


def generate_ssh(vendor: Vendor, device_type: DeviceType, config: SSHConfig) -> Fragment:
    """Generate SSH server configuration; users without credentials are skipped."""
    if not config.enabled:
        return Fragment.empty("SSH is disabled.")
    render = _RENDERERS.get(vendor)
    if render is None:
        return unsupported("SSH", vendor)
    out = CliBuilder()
    render(config, out)
    return out.build("SSH server configuration generated.")
