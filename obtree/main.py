import getopt
import os
import random
import sys

import obtree
from . import log
from . import util
from .exception import OBTreeError, FileParseError, ParseError
from .tree.bstree import BSTree

ORDERS = ('in', 'pre', 'post')

def read_input_file(filename, value_type):
    """Reads one value per line, skipping blank lines and # comments."""
    if filename == '-':
        return _read_values(sys.stdin, '<stdin>', value_type)
    with open(filename, 'r', encoding='utf-8') as f:
        return _read_values(f, filename, value_type)

def _read_values(f, filename, value_type):
    values = []
    i = 0
    try:
        for i, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            try:
                values.append(util.parse_value(line, value_type))
            except ParseError as e:
                raise FileParseError(filename, i, e)
    except UnicodeDecodeError as e:
        raise FileParseError(filename, i + 1, "cannot decode input: " + e.reason)
    return values

def _fmt(node):
    if node is None:
        return "none"
    return util.printsafe(str(node.value))

def _traverse(tree, order):
    values = []
    if order == 'pre':
        tree.traverse_preorder(values.append)
    elif order == 'post':
        tree.traverse_postorder(values.append)
    else:
        tree.traverse_inorder(values.append)
    return values

def remove_value(tree, value):
    """Removes the highest node holding value.

    Returns the (possibly new) root of the tree, which is None once the last
    node is gone.
    """
    node = tree.search(value)
    if node is None:
        log.warn("cannot remove ", value, ": not in tree")
        return tree
    replacement = node.remove()
    log.info("removed ", value)
    if node is tree:
        return replacement
    return tree

def print_find(tree, value, out):
    node = tree.search(value)
    if node is None:
        out.write("{}: not found\n".format(util.printsafe(str(value))))
        return
    out.write("{}: depth={:d} predecessor={} successor={}\n".format(
        _fmt(node), node.depth(), _fmt(node.predecessor()),
        _fmt(node.successor())))

def print_stats(tree, out):
    out.write("size: {:d}\n".format(tree.size()))
    out.write("height: {:d}\n".format(tree.height()))
    out.write("minimum: {}\n".format(_fmt(tree.minimum())))
    out.write("maximum: {}\n".format(_fmt(tree.maximum())))
    out.write("valid: {}\n".format("yes" if tree.is_bst() else "no"))

def obtree_main(argv, out=None):
    if out is None:
        out = sys.stdout
    log.logger = log.Logger()
    try:
        (options, values) = parse_arguments(argv)
    except OBTreeError as e:
        log.fatal_exit(2, e)

    try:
        if options['input'] is not None:
            values.extend(read_input_file(options['input'], options['type']))
        if not values:
            log.fatal_exit(2, 'no values given', "\n", "Try `",
                    str(os.path.basename(argv[0])),
                    " --help' for more information.")

        if options['shuffle']:
            random.Random(options['seed']).shuffle(values)
        elif len(values) > 2 and util.is_sorted(values):
            log.warn("input is sorted, the tree degenerates into a list\n",
                    "use --shuffle to randomize the insertion order")

        tree = BSTree.from_sequence(values)
        log.info("built tree of ", tree.size(), " nodes, height ",
                tree.height())

        for v in options['remove']:
            tree = remove_value(tree, v)
            if tree is None:
                log.info("tree is empty")
                return 0

        for v in options['find']:
            print_find(tree, v, out)

        if options['describe']:
            out.write(util.printsafe(tree.describe()) + "\n")

        if options['stats']:
            print_stats(tree, out)

        out.write(' '.join(util.printsafe(str(v)) for v in
            _traverse(tree, options['order'])) + "\n")

    except OBTreeError as e:
        log.fatal(e)
    except IOError as e:
        log.fatal(str(e))
    return 0

def default_options():
    opts = {
            'type' : 'int',
            'input' : None,
            'order' : 'in',
            'shuffle' : False,
            'seed' : None,
            'remove' : [],
            'find' : [],
            'describe' : False,
            'stats' : False,
            }
    return opts

def invalid_argument(opt, arg):
    log.fatal_exit(2, "invalid " + opt + " argument `" + str(arg) + "'")

def parse_arguments(argv):
    long_opts = [
            'color=',
            'describe',
            'find=',
            'help',
            'input=',
            'order=',
            'quiet',
            'remove=',
            'seed=',
            'shuffle',
            'stats',
            'type=',
            'verbose',
            'version'
    ]
    options = default_options()
    opts = 'df:hi:o:qr:st:v'
    try:
        opts, args = getopt.gnu_getopt(argv[1:], opts, long_opts)
    except getopt.GetoptError as err:
        log.fatal_exit(2, err, "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")

    # values given to -r/-f depend on --type, which may come later
    raw_remove = []
    raw_find = []
    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(os.path.basename(argv[0]))
            sys.exit(0)

        elif opt in ('-t', '--type'):
            if arg not in util.VALUE_TYPES:
                invalid_argument(opt, arg)
            options['type'] = arg

        elif opt in ('-i', '--input'):
            options['input'] = arg

        elif opt in ('-o', '--order'):
            if arg not in ORDERS:
                invalid_argument(opt, arg)
            options['order'] = arg

        elif opt in ('-s', '--shuffle'):
            options['shuffle'] = True

        elif opt in ('--seed',):
            try:
                options['seed'] = int(arg)
            except ValueError:
                invalid_argument(opt, arg)

        elif opt in ('-r', '--remove'):
            raw_remove.append(arg)

        elif opt in ('-f', '--find'):
            raw_find.append(arg)

        elif opt in ('-d', '--describe'):
            options['describe'] = True

        elif opt in ('--stats',):
            options['stats'] = True

        elif opt in ('-v', '--verbose'):
            log.logger.loglevel += 1

        elif opt in ('-q', '--quiet'):
            log.logger.loglevel = log.LOG_ERROR

        elif opt in ('--color',):
            try:
                log.logger.set_colors(arg)
            except ValueError:
                invalid_argument(opt, arg)

        elif opt in ('--version',):
            version()
            sys.exit(0)

        else:
            invalid_argument(opt, "")

    options['remove'] = [util.parse_value(a, options['type'])
            for a in raw_remove]
    options['find'] = [util.parse_value(a, options['type'])
            for a in raw_find]
    values = [util.parse_value(a, options['type']) for a in args]
    return (options, values)

def version():
    sys.stdout.write("obtree " + obtree.__version__ + "\n")


def usage(program_name):
    def_opts = default_options()
    sys.stdout.write(
            'Usage: {0:s} [option]... [VALUE]...'
            .format(program_name))
    sys.stdout.write(
'''
Build a binary search tree from VALUEs and print its traversal

Options:
      --version              show program's version number and exit
  -h, --help                 show this help message and exit
  -v, --verbose              increase verbosity level (use multiple times for
                               greater effect)
  -q, --quiet                only report errors
      --color=WHEN           colorize output; WHEN can be 'auto' (default),
                               'always' or 'never'.

Input:
  -t, --type=TYPE            value type: 'int', 'float' or 'str'
                               (default {vtype:s})
  -i, --input=FILE           also read one value per line from FILE
                               (use '-' for stdin)
  -s, --shuffle              insert the values in random order. The tree is
                               not self-balancing, sorted input makes it
                               degenerate into a list.
      --seed=N               seed for --shuffle

Operations:
  -r, --remove=VALUE         remove the node holding VALUE (may be repeated)
  -f, --find=VALUE           show depth, predecessor and successor of the
                               node holding VALUE (may be repeated)

Output:
  -o, --order=ORDER          traversal order: 'in', 'pre' or 'post'
                               (default {order:s})
  -d, --describe             print the tree structure
      --stats                print size, height, minimum and maximum
'''.format(vtype=def_opts['type'], order=def_opts['order'])
    )

def main():
    try:
        sys.exit(obtree_main(sys.argv))
    except KeyboardInterrupt:
        sys.stderr.write("\nreceived SIGINT, terminating\n")
        sys.exit(3)
