import sys
from argparse import ArgumentParser
from json import dumps
from os import getenv
from typing import NoReturn, Optional

from dotenv import load_dotenv

from .errors import GitURLError
from .parsed_url import ParsedURL
from .parser import parse
from .hosting import describe
from .remotes import open_repo, remote_urls


version = "0.1.0"
program = "git-remote-url"

output_formats = ["text", "json"]


def main(argv: Optional[list[str]] = None):
    parser = ArgumentParser(
        prog=program, description="Parse Git remote addresses into URL components."
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {version}"
    )
    parser.add_argument("addresses", nargs="*", metavar="ADDRESS")
    parser.add_argument(
        "-r",
        "--remotes",
        action="store_true",
        help="parse the remotes of the repository in the current directory",
    )
    parser.add_argument("--json", action="store_true", help="print JSON")
    parser.add_argument(
        "-p", "--platform", action="store_true", help="detect the hosting platform"
    )

    args = parser.parse_args(argv)

    load_dotenv()

    output_format = "json" if args.json else get_output_format()

    if args.remotes and args.addresses:
        fail("--remotes cannot be combined with ADDRESS arguments.")

    if args.remotes:
        addresses = collect_remote_addresses()
    else:
        addresses = [(address, address) for address in args.addresses]

    if not addresses:
        fail("Nothing to parse.")

    reports = []
    failures = 0
    for label, address in addresses:
        try:
            url = parse(address)
        except GitURLError as error:
            warn(str(error))
            failures += 1
            continue
        reports.append(build_report(label, address, url, args.platform))

    if output_format == "json":
        print(dumps(reports, indent=2))
    else:
        for report in reports:
            print(format_report(report))

    if failures:
        fail(f"{failures} of {len(addresses)} address(es) could not be parsed.")


def get_output_format() -> str:
    output_format = getenv("GITREMOTEURL_FORMAT", "text").strip().lower()
    if output_format not in output_formats:
        fail(
            f"GITREMOTEURL_FORMAT must be one of the following formats: {', '.join(output_formats)}."
        )
    return output_format


def collect_remote_addresses() -> list[tuple[str, str]]:
    try:
        repo = open_repo()
    except RuntimeError as error:
        fail(str(error))

    only_remote = getenv("GITREMOTEURL_REMOTE")
    addresses: list[tuple[str, str]] = []
    for name, urls in remote_urls(repo).items():
        if only_remote and name != only_remote:
            continue
        addresses.extend((name, url) for url in urls)

    if only_remote and not addresses:
        fail(f"Remote {only_remote} not found.")
    return addresses


def build_report(
    label: str, address: str, url: ParsedURL, with_platform: bool
) -> dict:
    report: dict = {"address": label, **mask_password(url.as_dict())}
    if with_platform:
        remote_info = describe(address, url)
        report["platform"] = remote_info.platform
        report["namespace"] = remote_info.namespace
    return report


def mask_password(components: dict) -> dict:
    if components.get("password"):
        components["password"] = "****"
    return components


def format_report(report: dict) -> str:
    lines = [str(report["address"])]
    for key, value in report.items():
        if key == "address" or value is None:
            continue
        lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def fail(message: str) -> NoReturn:
    raise SystemExit(f"{program} error: {message}")


def warn(message: str):
    print(f"{program} error: {message}", file=sys.stderr)
