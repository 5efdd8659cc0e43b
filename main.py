import argparse
import json
import logging
import mimetypes
import os
import sys
from pathlib import Path

from core.config_loader import load_config
from core.exceptions import TrustSignalError
from etl.orchestrator import ResumeTrustService
from etl.resume.extractor import DOCX_MEDIA_TYPE

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

mimetypes.add_type(DOCX_MEDIA_TYPE, '.docx')


def analyze_command(args) -> int:
    """Analyse a resume file and print the extracted profile and a score."""
    config = load_config(args.config)
    service = ResumeTrustService.from_config(config)

    path = Path(args.file)
    if not path.exists():
        logger.error(f"Resume file not found: {path}")
        return 1

    media_type = args.media_type or mimetypes.guess_type(path.name)[0]

    try:
        profile = service.analyze(path.read_bytes(), media_type)
    except TrustSignalError as e:
        logger.error(str(e))
        return 1

    components = service.scorer.score(
        financially_trusted=args.bank_connected,
        skill_count=len(profile.unique_skills),
        experience_years=profile.experience_years
    )

    print(json.dumps({
        "skills_by_category": profile.skills_by_category,
        "skills": profile.unique_skills,
        "experience_years": profile.experience_years,
        "experience_mentions": profile.experience_mentions,
        "education": profile.education,
        "role_matches": profile.role_matches,
        "score": components.total,
        "components": components.to_dict(),
    }, indent=2, ensure_ascii=False))
    return 0


def init_db_command(args) -> int:
    if args.config:
        os.environ["TRUST_CONFIG"] = args.config
    from database.init_db import init_db
    init_db()
    return 0


def serve_command(args) -> int:
    if args.config:
        os.environ["TRUST_CONFIG"] = args.config
    from web.backend.app import main as serve
    serve()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Participant trust signal service")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Analyse a resume file")
    analyze.add_argument("file", help="PDF or DOCX resume")
    analyze.add_argument("--media-type", default=None, help="Override the detected media type")
    analyze.add_argument("--bank-connected", action="store_true",
                         help="Score as if a financial account is connected")
    analyze.set_defaults(func=analyze_command)

    init_db = subparsers.add_parser("init-db", help="Create database tables")
    init_db.set_defaults(func=init_db_command)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.set_defaults(func=serve_command)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
