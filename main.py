from __future__ import annotations

import argparse
import io
import json
import logging
from pathlib import Path

from pydantic import ValidationError
from pypdf import PdfReader

from tripsheet.config import get_settings
from tripsheet.render.document import ItineraryRenderError, build_itinerary_pdf
from tripsheet.storage import build_output_filename, read_json, write_bytes_atomic
from tripsheet.types import ItineraryDocument
from tripsheet.validation import sanitize_itinerary, validate_itinerary


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _load_document(path_value: str) -> tuple[ItineraryDocument | None, dict]:
    input_path = Path(path_value).expanduser().resolve()
    if not input_path.exists() or not input_path.is_file():
        return None, {'status': 'error', 'message': f'Input not found: {input_path}'}
    try:
        payload = read_json(input_path)
        document = ItineraryDocument.model_validate(payload)
    except (ValueError, ValidationError) as exc:
        return None, {'status': 'error', 'message': f'Invalid itinerary JSON: {exc}'}
    return sanitize_itinerary(document), {}


def _page_count(pdf_bytes: bytes) -> int:
    return len(PdfReader(io.BytesIO(pdf_bytes)).pages)


def cmd_validate(args: argparse.Namespace) -> int:
    document, error = _load_document(args.input)
    if document is None:
        _print_json(error)
        return 2

    errors = validate_itinerary(document)
    _print_json({'status': 'ok' if not errors else 'invalid', 'errors': errors})
    return 0 if not errors else 1


def cmd_render(args: argparse.Namespace) -> int:
    settings = get_settings()
    document, error = _load_document(args.input)
    if document is None:
        _print_json(error)
        return 2

    if not args.skip_validation:
        errors = validate_itinerary(document)
        if errors:
            _print_json({'status': 'invalid', 'errors': errors})
            return 1

    dark_mode = False if args.light else None
    try:
        pdf_bytes = build_itinerary_pdf(document, dark_mode=dark_mode, settings=settings)
    except ItineraryRenderError as exc:
        _print_json({'status': 'error', 'message': str(exc)})
        return 2

    if args.output:
        output_path = Path(args.output).expanduser().resolve()
    else:
        output_path = (settings.output_dir / build_output_filename(document.client_name)).resolve()
    write_bytes_atomic(output_path, pdf_bytes)

    _print_json(
        {
            'status': 'ok',
            'output_path': str(output_path),
            'bytes': len(pdf_bytes),
            'pages': _page_count(pdf_bytes),
        }
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='tripsheet itinerary PDF renderer')
    sub = parser.add_subparsers(dest='command', required=True)

    render = sub.add_parser('render', help='Render an itinerary JSON file to PDF')
    render.add_argument('--input', required=True, help='Path to itinerary JSON')
    render.add_argument('--output', required=False, help='Output PDF path')
    render.add_argument('--light', action='store_true', help='Use the light theme')
    render.add_argument('--skip-validation', action='store_true', help='Render without validating required fields')
    render.set_defaults(func=cmd_render)

    validate = sub.add_parser('validate', help='Validate an itinerary JSON file')
    validate.add_argument('--input', required=True, help='Path to itinerary JSON')
    validate.set_defaults(func=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    return int(args.func(args))


if __name__ == '__main__':
    raise SystemExit(main())
