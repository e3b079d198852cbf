from argparse import ArgumentParser
import logging
import os
import sys

from cosigner import cosign
from cosigner.errors import CosignerError, UnsupportedPlatform
from cosigner.options import OPTIONS, is_supported
from cosigner.settings import SigningParameters

logger = logging.getLogger("cosigner")


def build_parser(environ=None) -> ArgumentParser:
    environ = os.environ if environ is None else environ
    parser = ArgumentParser(
        prog="cosigner",
        description="Change an Xcode project's code signing settings before building a target.",
    )
    for option in OPTIONS:
        default = option.env_default(environ)
        help_text = option.description
        if option.env_name:
            help_text += f" (env: {option.env_name})"
        parser.add_argument(option.flag, dest=option.key, default=default, help=help_text)
    parser.add_argument(
        "--platform",
        default=environ.get("COSIGNER_PLATFORM", "ios"),
        help="Build platform, only ios and mac are supported (env: COSIGNER_PLATFORM)",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def parse_args(argv=None, environ=None):
    parser = build_parser(environ)
    args = parser.parse_args(argv)
    # required options may come from the environment, so check after parsing
    missing = [option.flag for option in OPTIONS if not option.optional and getattr(args, option.key) is None]
    if missing:
        parser.error("missing required option(s): " + ", ".join(missing))
    return args


def main(argv=None, environ=None) -> int:
    args = parse_args(argv, environ)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    params = SigningParameters(
        profile_name=args.profile_name,
        code_sign_style=args.code_sign_style,
        code_sign_identity=args.code_sign_identity,
        profile_uuid=args.profile_uuid,
        development_team=args.development_team,
        bundle_identifier=args.bundle_identifier,
    )
    try:
        if not is_supported(args.platform):
            raise UnsupportedPlatform(args.platform)
        cosign(args.xcodeproj_path, args.scheme, args.build_configuration, params)
    except CosignerError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
