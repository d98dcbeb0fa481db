import json
import sys

from stendhal.items import populate
from stendhal.remote import LocalSource, RemoteSource
from stendhal.schema import validate_table
from universal.files import makedirs, write_table
from universal.options import exec_main, table_option_parser


def item_table(options, args):
    if options.local:
        source = LocalSource(options.local, options.branch)
    else:
        source = RemoteSource(options.branch)
    struct = populate(
        source,
        requested_class=options.item_class,
        sort_by=options.sort,
        descending=options.descending,
        include_unattainable=options.unattainable,
        workers=options.workers)
    if not options.stdout:
        sys.stderr.write("%s: %d items\n" % (struct["title"], len(struct["items"])))
    if not options.skip_schema:
        validate_table(struct)
    if options.stdout:
        print(json.dumps(struct, indent=2))
    if not options.dryrun and options.output:
        jsondir = makedirs(options.output, "items")
        write_table(jsondir, struct)
    return struct


def main(argv=None):
    usage = "usage: %prog [options]\nBuilds a sortable table of item statistics."
    parser = table_option_parser(usage)
    (options, args) = parser.parse_args(argv)
    exec_main(options, args, item_table)
