"""
Terminal contact form: name + phone -> Odoo.
Run: python -m form (from repo root, with .env or env vars set). --list prints contacts.
"""
import argparse
import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from form.controller import ContactFormController  # noqa: E402
from form.messages import format_message, get_messages  # noqa: E402
from odoocontacts.application import ContactSubmissionService  # noqa: E402
from odoocontacts.domain import SubmissionState  # noqa: E402
from odoocontacts.infrastructure import OdooSettings, build_gateway  # noqa: E402

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)


def _print_result(state: SubmissionState) -> None:
    if state.success:
        print(state.success)
    elif state.error:
        print(f"Error: {state.error}")


async def _prompt(label: str) -> str:
    return await asyncio.to_thread(input, label)


async def run_form(service: ContactSubmissionService) -> None:
    controller = ContactFormController(service)
    print("Add a contact to Odoo. Ctrl-D to quit.")
    try:
        while True:
            controller.set_name(await _prompt("Name: "))
            controller.set_phone(await _prompt("Phone: "))
            print("Submitting...")
            _print_result(await controller.submit())
    except (EOFError, KeyboardInterrupt):
        print()
    finally:
        controller.close()


async def list_contacts(service: ContactSubmissionService) -> None:
    contacts = await service.fetch_contacts()
    if not contacts:
        print(format_message(get_messages(), "empty_list"))
        return
    for c in contacts:
        print(f"{c.id}\t{c.name}\t{c.phone or '-'}\t{c.email or '-'}")


async def _main(args: argparse.Namespace) -> None:
    try:
        settings = OdooSettings.from_env()
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}") from e
    async with build_gateway(settings) as gateway:
        service = ContactSubmissionService(gateway, contacts_limit=settings.contacts_limit)
        if args.list:
            await list_contacts(service)
        else:
            await run_form(service)


def main() -> None:
    parser = argparse.ArgumentParser(prog="python -m form", description=__doc__)
    parser.add_argument("--list", action="store_true", help="print the first contacts and exit")
    asyncio.run(_main(parser.parse_args()))


if __name__ == "__main__":
    main()
