import argparse
import json
import logging
import sys

from core.app_context import AppContext
from core.config_loader import load_config
from core.exceptions import MatchingError
from database.init_db import init_db, seed_sample_data

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def cmd_init_db(ctx: AppContext, args):
    init_db(ctx.engine)
    if args.seed:
        seed_sample_data(ctx.session_factory)


def cmd_match(ctx: AppContext, args):
    response = ctx.matching_service.find_matches_response(args.gig_id, limit=args.limit)

    logger.info(f"Top matches for '{response.gig.title}':")
    for match in response.matches:
        logger.info(f"  {match.rank}. {match.talent.name} ({match.talent.city}): {match.overall_score}%")
        if match.explanation:
            logger.info(f"     {match.explanation}")

    if args.json:
        print(response.model_dump_json(indent=2))


def cmd_show(ctx: AppContext, args):
    response = ctx.matching_service.get_saved_matches(args.gig_id)
    print(response.model_dump_json(indent=2))


def cmd_feedback(ctx: AppContext, args):
    response = ctx.matching_service.submit_feedback(args.match_id, args.rating, args.text)
    print(response.model_dump_json(indent=2))


def cmd_status(ctx: AppContext, args):
    status = ctx.matching_service.update_match_status(args.match_id, args.status)
    logger.info(f"Match {args.match_id} is now '{status}'")


def cmd_algorithm_info(ctx: AppContext, args):
    print(json.dumps(ctx.matching_service.algorithm_info(), indent=2, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GigMatch talent matching engine")
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to the YAML configuration file')
    subparsers = parser.add_subparsers(dest='command', required=True)

    init_parser = subparsers.add_parser('init-db', help='Create tables')
    init_parser.add_argument('--seed', action='store_true', help='Insert sample clients, talents and gigs')
    init_parser.set_defaults(handler=cmd_init_db)

    match_parser = subparsers.add_parser('match', help='Rank talent for a gig and store the result')
    match_parser.add_argument('gig_id', type=int)
    match_parser.add_argument('--limit', type=int, default=None, help='Maximum matches (1-50)')
    match_parser.add_argument('--json', action='store_true', help='Print the full response as JSON')
    match_parser.set_defaults(handler=cmd_match)

    show_parser = subparsers.add_parser('show', help='Show stored matches for a gig')
    show_parser.add_argument('gig_id', type=int)
    show_parser.set_defaults(handler=cmd_show)

    feedback_parser = subparsers.add_parser('feedback', help='Rate a match (1-5)')
    feedback_parser.add_argument('match_id', type=int)
    feedback_parser.add_argument('rating', type=int)
    feedback_parser.add_argument('--text', type=str, default=None)
    feedback_parser.set_defaults(handler=cmd_feedback)

    status_parser = subparsers.add_parser('status', help='Update the status of a match')
    status_parser.add_argument('match_id', type=int)
    status_parser.add_argument('status', choices=['suggested', 'contacted', 'accepted', 'rejected'])
    status_parser.set_defaults(handler=cmd_status)

    info_parser = subparsers.add_parser('algorithm-info', help='Describe the scoring criteria')
    info_parser.set_defaults(handler=cmd_algorithm_info)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    configure_logging(config.logging.level)

    ctx = AppContext.build(config)
    try:
        args.handler(ctx, args)
    except MatchingError as e:
        logger.error(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
