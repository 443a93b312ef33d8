# ssa_core/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import CodecConfig
from .subtitles.codec import record_to_dict
from .subtitles.errors import CodecError
from .subtitles.script import (
    ScriptSections,
    SectionReport,
    decode_section,
    read_script,
    section_context,
    verify_script,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ssa-roundtrip",
        description="Check that every style and event line of ASS/SSA scripts "
                    "re-encodes losslessly.",
    )
    p.add_argument("files", type=Path, nargs="+")
    p.add_argument("--config", type=Path, help="JSON settings file")
    p.add_argument("--encoding", help="input encoding (default: detect)")
    p.add_argument("--json", action="store_true", help="print a JSON report")
    p.add_argument("--records", action="store_true",
                   help="with --json, include the decoded records of each clean section")
    p.add_argument("--stop-on-error", action="store_true")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def _section_dict(script: ScriptSections, report: SectionReport,
                  config: CodecConfig, with_records: bool) -> dict:
    data = report.to_dict()
    if with_records and report.ok:
        decoded = decode_section(
            script.sections[report.section],
            section_context(report.section, config),
            config.get('comment_prefix', ';'),
        )
        data['decoded'] = [
            dict(record_to_dict(record), line_no=line_no)
            for line_no, record in decoded.records
        ]
    return data


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = CodecConfig(args.config)
    if args.stop_on_error:
        config.set('stop_on_error', True)
    if args.encoding:
        config.set('encoding', args.encoding)

    if args.verbose:
        level = logging.DEBUG
    else:
        level_name = str(config.get('log_level', 'INFO')).upper()
        level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    status = 0
    report = {}
    for path in args.files:
        try:
            script = read_script(path, config.get('encoding') or None)
            sections = verify_script(script, config)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read %s: %s", path, e)
            status = max(status, 2)
            report[str(path)] = {'error': str(e)}
            continue
        except CodecError as e:
            logger.error("%s: %s", path, e)
            status = max(status, 1)
            report[str(path)] = {'error': str(e)}
            continue

        if any(not s.ok for s in sections):
            status = max(status, 1)
        if args.json:
            report[str(path)] = [
                _section_dict(script, s, config, args.records) for s in sections
            ]
        else:
            for s in sections:
                state = "OK" if s.ok else f"{len(s.failures)} FAILED"
                print(f"{path}: {s.section}: {s.records} record(s) {state}")

    if args.json:
        json.dump(report, sys.stdout, indent=2, ensure_ascii=False)
        print()
    return status


if __name__ == "__main__":
    sys.exit(main())
