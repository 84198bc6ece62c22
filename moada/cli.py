"""Command line client for the exchange service.

    moada upload report.pdf [--email me@example.com]
    moada download <public id> [--to ~/Downloads]
    moada me
    moada info <private id>
    moada delete <private id>
    moada erase
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from moada.api.account.controllers.account_controller import AccountInfoController
from moada.api.download.controllers.download_controller import DownloadController
from moada.api.download.services.download_service import SaveToDirectory
from moada.api.files.controllers.files_controller import PrivateFileController
from moada.api.upload.controllers.upload_controller import UploadController
from moada.api.upload.dto.upload import SelectedFile
from moada.config import DOWNLOADS_DIR, EXCHANGE_API_URL, LOG_FORMAT, LOG_LEVEL
from moada.dates import format_date
from moada.errors import PreconditionViolation
from moada.lifecycle import Failed
from moada.remote import create_client

logger = logging.getLogger("moada.cli")


def _print_file(record) -> None:
    print(f"Public Id: {record.public_id}")
    print(f"Private Id: {record.private_id}")
    print(f"Name: {record.name} ({record.size} bytes)")
    print(f"Saved Date: {format_date(record.saved_date)}")
    print(f"Expire Date: {format_date(record.expire_date)}")


def _print_account(record) -> None:
    print(f"User IP: {record.origin_address}")
    print(f"Files Number: {record.file_count}")
    print(f"Used Space: {record.used_space_bytes}")
    print(f"API Calls: {record.api_call_count}")
    print(f"Last API Call Date: {format_date(record.last_api_call_date)}")
    print(f"IP Saved Date: {format_date(record.origin_saved_date)}")
    print(f"IP Expire Date: {format_date(record.origin_expire_date)}")
    print("Files:")
    for file_id in record.file_identifiers:
        print(f"  - {file_id}")
    for anomaly in record.anomalies:
        print(f"[WARNING] {anomaly}")


def _print_deleted(message: str) -> None:
    print(message or "File deleted successfully")


async def run(args, client) -> int:
    """Drive one controller for the chosen command; returns the exit code."""
    if args.command == "upload":
        path = Path(args.path)
        try:
            selected = SelectedFile(filename=path.name, content=path.read_bytes())
        except OSError as e:
            print(f"[ERROR] Cannot read {path}: {e}", file=sys.stderr)
            return 2
        controller = UploadController(client)
        await controller.submit(selected, email=args.email)
        show = _print_file
    elif args.command == "download":
        delivery = SaveToDirectory(args.to)
        controller = DownloadController(client, delivery)
        await controller.download(args.public_id)
        def show(delivered):
            print(f"Saved {delivered.size} bytes to {delivery.saved[-1]}")
    elif args.command == "me":
        controller = AccountInfoController(client)
        await controller.refresh()
        show = _print_account
    elif args.command == "erase":
        controller = AccountInfoController(client)
        await controller.erase()
        show = None
    elif args.command == "info":
        controller = PrivateFileController(client)
        await controller.lookup(args.private_id)
        show = _print_file
    else:
        controller = PrivateFileController(client)
        await controller.delete(args.private_id)
        show = _print_deleted

    state = controller.state
    if isinstance(state, Failed):
        print(f"[ERROR] {state.kind.value}: {state.detail}", file=sys.stderr)
        return 1
    if show is None:
        print("All of your data has been erased")
    else:
        show(state.value)
    return 0


async def _main(args) -> int:
    async with create_client(base_url=args.api_url) as client:
        try:
            return await run(args, client)
        except PreconditionViolation as e:
            print(f"[ERROR] {e.message}", file=sys.stderr)
            return 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="moada", description="MOADA file exchange client")
    parser.add_argument("--api-url", default=EXCHANGE_API_URL,
                        help=f"Exchange service URL (default: {EXCHANGE_API_URL})")
    commands = parser.add_subparsers(dest="command", required=True)

    upload = commands.add_parser("upload", help="Upload a file")
    upload.add_argument("path", help="File to upload")
    upload.add_argument("--email", default="", help="Optional contact e-mail")

    download = commands.add_parser("download", help="Download a file by public id")
    download.add_argument("public_id")
    download.add_argument("--to", type=Path, default=DOWNLOADS_DIR,
                          help="Directory to save into (default: MOADA_DOWNLOADS_DIR or .)")

    commands.add_parser("me", help="Show usage information for this address")
    commands.add_parser("erase", help="Erase every file and record for this address")

    info = commands.add_parser("info", help="Show a file record by private id")
    info.add_argument("private_id")

    delete = commands.add_parser("delete", help="Delete a file by private id")
    delete.add_argument("private_id")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return asyncio.run(_main(args))


if __name__ == "__main__":
    sys.exit(main())
