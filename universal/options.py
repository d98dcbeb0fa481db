import sys
import os
from optparse import OptionParser


def exec_main(options, args, function):
    if not options.output and not options.dryrun and not options.stdout:
        sys.stderr.write("-o/--output required\n")
        sys.exit(1)
    if options.output and not options.dryrun:
        if not os.path.exists(options.output):
            sys.stderr.write(
                "-o/--output points to a directory that does not exist\n")
            sys.exit(1)
        if not os.path.isdir(options.output):
            sys.stderr.write(
                "-o/--output points to a file, it must point to a directory\n")
            sys.exit(1)
    if options.local and not os.path.isdir(options.local):
        sys.stderr.write("-l/--local must point to a game checkout directory\n")
        sys.exit(1)
    return function(options, args)


def option_parser(usage):
    parser = OptionParser(usage=usage)
    parser.add_option(
        "-o", "--output", dest="output",
        help="Output data directory. (required unless --stdout or --dry-run)")
    parser.add_option(
        "-d", "--dry-run", dest="dryrun", default=False, action="store_true",
        help="Dry run (no actual output)")
    parser.add_option(
        "-k", "--skip-schema", dest="skip_schema", default=False, action="store_true",
        help="Skip schema validation")
    parser.add_option(
        "--stdout", dest="stdout", default=False, action="store_true",
        help="Write json to stdout")
    return parser


def table_option_parser(usage):
    parser = option_parser(usage)
    parser.add_option(
        "-c", "--class", dest="item_class", default=None,
        help="Item class or group to list (default: weapons)")
    parser.add_option(
        "-s", "--sort", dest="sort", default="name",
        help="Column to sort by (default: name)")
    parser.add_option(
        "--descending", dest="descending", default=False, action="store_true",
        help="Sort in descending order")
    parser.add_option(
        "-u", "--unattainable", dest="unattainable", default=False, action="store_true",
        help="Include items that cannot be obtained in game")
    parser.add_option(
        "-b", "--branch", dest="branch", default="master",
        help="Repository branch to fetch documents from (default: master)")
    parser.add_option(
        "-l", "--local", dest="local", default=None,
        help="Read documents from a local game checkout instead of fetching")
    parser.add_option(
        "-w", "--workers", dest="workers", default=4, type="int",
        help="Number of concurrent document fetches (default: 4)")
    return parser
