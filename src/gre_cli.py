import argparse
import logging
from pathlib import Path
import qrcode

from gre_backend.config import LOG_LEVEL
from gre_backend.config_builder import counterpart_command, render_boot_script
from gre_backend.models import IRAN, KHAREJ, TunnelConfig
from gre_backend.state import load_state
from gre_backend.system import is_root
from gre_backend.tunnel import configure, remove_tunnel
from gre_backend.validation import validate_ipv4, validate_prefix

PREFIX_PROMPT = "Enter tunnel subnet prefix (first 3 octets, e.g. 10.10.10 or 192.168.77): "

LABELS = {IRAN: "Iran", KHAREJ: "Kharej"}


def _require_root() -> bool:
    if not is_root():
        print("This script must be run as root")
        return False
    return True


def _apply(tunnel: TunnelConfig) -> int:
    label = LABELS[tunnel.role]
    print(f"[*] Creating boot script for {label} Server...")
    try:
        path = configure(tunnel)
    except (RuntimeError, OSError) as e:
        print(f"[ERROR] {e}")
        print("[ERROR] Check the configuration.")
        return 1

    print(f"[+] {path} created and executed.")
    print("[+] Changes applied successfully.")
    print("[!] On the other server, run:")
    print(f"    sudo {counterpart_command(tunnel)}")
    return 0


# ---------------------------------------------------
# Commande : menu interactif (défaut)
# ---------------------------------------------------

def _prompt_tunnel(role: str) -> TunnelConfig:
    this, other = (LABELS[IRAN], LABELS[KHAREJ]) if role == IRAN else (LABELS[KHAREJ], LABELS[IRAN])
    local_ip = validate_ipv4(input(f"Enter {this} Server Public IPv4 address: "))
    remote_ip = validate_ipv4(input(f"Enter {other} Server Public IPv4 address: "))
    prefix = validate_prefix(input(PREFIX_PROMPT))
    return TunnelConfig(role=role, local_ip=local_ip, remote_ip=remote_ip, prefix=prefix)


def cmd_menu(args):
    if not _require_root():
        return 1

    print("Select an option:")
    print("1) Configure Iran Server")
    print("2) Configure Kharej Server")
    print("3) Remove Tunnel")
    choice = input("Enter choice (1, 2, or 3): ").strip()

    if choice == "3":
        return _remove()

    roles = {"1": IRAN, "2": KHAREJ}
    if choice not in roles:
        print("Invalid choice. Please select 1, 2, or 3.")
        return 1

    role = roles[choice]
    print(f"[*] Configuring {LABELS[role]} Server...")
    try:
        tunnel = _prompt_tunnel(role)
    except ValueError as e:
        print(e)
        return 1

    return _apply(tunnel)


# ---------------------------------------------------
# Commandes : iran / kharej (non interactif)
# ---------------------------------------------------

def _tunnel_from_args(args) -> TunnelConfig:
    return TunnelConfig(
        role=args.role,
        local_ip=validate_ipv4(args.local),
        remote_ip=validate_ipv4(args.remote),
        prefix=validate_prefix(args.prefix),
    )


def cmd_configure(args):
    try:
        tunnel = _tunnel_from_args(args)
    except ValueError as e:
        print(e)
        return 1

    if not _require_root():
        return 1
    return _apply(tunnel)


# ---------------------------------------------------
# Commande : show (rendu seul, aucun effet système)
# ---------------------------------------------------

def cmd_show(args):
    try:
        tunnel = _tunnel_from_args(args)
    except ValueError as e:
        print(e)
        return 1

    print(render_boot_script(tunnel), end="")
    return 0


# ---------------------------------------------------
# Commande : remove
# ---------------------------------------------------

def _remove() -> int:
    print("[*] Removing GRE tunnel and NAT rules...")
    try:
        report = remove_tunnel()
    except OSError as e:
        print(f"[ERROR] {e}")
        return 1

    for note in report.notes:
        print(f"[!] {note}")
    if report.tunnel_removed:
        print("[OK] GRE tunnel removed.")
    print(f"[+] NAT rules deleted : {report.rules_deleted}")
    print(f"[+] Chains flushed    : {', '.join(report.chains_flushed) or 'none'}")
    if report.boot_script_removed:
        print("[OK] Boot script removed.")
    print("[+] Cleanup completed.")
    return 0


def cmd_remove(args):
    if not _require_root():
        return 1
    return _remove()


# ---------------------------------------------------
# Commande : status
# ---------------------------------------------------

def cmd_status(args):
    tunnel = load_state()
    if tunnel is None:
        print("No tunnel recorded.")
        return 0

    print("=== Tunnel ===")
    print(f"Role       : {LABELS[tunnel.role]}")
    print(f"Interface  : {tunnel.interface} (mtu {tunnel.mtu})")
    print(f"Local      : {tunnel.local_ip} -> {tunnel.local_tunnel_ip}")
    print(f"Remote     : {tunnel.remote_ip} -> {tunnel.remote_tunnel_ip}")
    return 0


# ---------------------------------------------------
# Commande : handoff-qr
# ---------------------------------------------------

def cmd_handoff_qr(args):
    tunnel = load_state()
    if tunnel is None:
        print("[ERROR] No tunnel recorded.")
        return 1

    command = counterpart_command(tunnel)
    img = qrcode.make(command)

    path = Path(args.output) if args.output else Path("configs") / f"gretun-{tunnel.role}.png"
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(str(path))

    print(f"[OK] QR code written: {path}")
    print(f"    {command}")
    return 0


# ---------------------------------------------------
# CLI / Parser
# ---------------------------------------------------

def _add_tunnel_args(p):
    p.add_argument("--local", required=True, help="public IPv4 of this server")
    p.add_argument("--remote", required=True, help="public IPv4 of the other server")
    p.add_argument("--prefix", required=True, help="first 3 octets, e.g. 10.10.10")


def build_parser():
    parser = argparse.ArgumentParser(prog="gretun")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="cmd")
    parser.set_defaults(func=cmd_menu)

    # iran / kharej
    for role in (IRAN, KHAREJ):
        p_conf = sub.add_parser(role)
        _add_tunnel_args(p_conf)
        p_conf.set_defaults(func=cmd_configure, role=role)

    # show
    p_show = sub.add_parser("show")
    p_show.add_argument("role", choices=[IRAN, KHAREJ])
    _add_tunnel_args(p_show)
    p_show.set_defaults(func=cmd_show)

    # remove
    p_rm = sub.add_parser("remove")
    p_rm.set_defaults(func=cmd_remove)

    # status
    p_status = sub.add_parser("status")
    p_status.set_defaults(func=cmd_status)

    # handoff-qr
    p_qr = sub.add_parser("handoff-qr")
    p_qr.add_argument("--output")
    p_qr.set_defaults(func=cmd_handoff_qr)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s [%(name)s] %(message)s",
    )

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
