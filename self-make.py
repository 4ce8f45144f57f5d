#!/usr/bin/env python3

import argparse
import os
import sys

sys.dont_write_bytecode = True

from selfmake import env
from selfmake.bootstrap import go_rebuild_urself
from selfmake.command import cmd
from selfmake.config import global_config
from selfmake.target import build_target, source, target
from selfmake.utils import fatal_errors


parser = argparse.ArgumentParser('self-make', description='rebuild yourself, then the sample project')

parser.add_argument('-v', '--verbose', action='store_true', help='show details')


DEFINITION = os.path.abspath(__file__)


if __name__ == '__main__':
    # everything else on the command line is passed through on restart
    ns, _ = parser.parse_known_args()

    with fatal_errors():
        config = global_config()
        env.set_verbose(ns.verbose or config.verbose)

        go_rebuild_urself(sys.argv, DEFINITION, config=config)

        src_main = source('main.c')
        main_obj = target('main.o', [src_main], cmd(config.cc, '-c', 'main.c', '-o', 'main.o'))
        main = target('main2', [src_main, main_obj], cmd(config.cc, 'main.o', '-o', 'main2'))

        build_target(main, DEFINITION)
