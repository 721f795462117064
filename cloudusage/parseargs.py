"""Module to parse command line arguments and set specific flags."""

import argparse
import pathlib
import logging
import os

import psutil

file_name = pathlib.Path(__file__).name

SERVICES = ['backup', 'tiering']
EXPORTS = ['none', 'local', 'cloud']


class argp:
    """Wraps argparse to add default arguments."""

    def __init__(
        self, script_name="unknown", description="default description", parse=True
    ):
        """Initialize the parser with common arguments."""
        self.description = description
        self.pid = os.getpid()
        self.cmd_line = psutil.Process(self.pid).cmdline()

        logging.info(f"{file_name} : Command line '{self.cmd_line}'")
        logging.debug(f"{file_name} : Working directory: {psutil.Process(self.pid).cwd()}")

        self.parser = argparse.ArgumentParser(description=self.description)
        self.parser.add_argument(
            "-cl",
            "--cluster",
            type=str,
            required=True,
            help="cluster hostname or ip",
        )
        self.parser.add_argument(
            "-s",
            "--service",
            type=str,
            choices=SERVICES,
            default="backup",
            help="the cloud service to report on, default backup",
        )
        self.parser.add_argument(
            "-e",
            "--export",
            type=str,
            choices=EXPORTS,
            default="none",
            help="""export a csv file: 'local' keeps it in the output"""
            """ directory, 'cloud' also uploads it to the bucket""",
        )
        self.parser.add_argument(
            "-x",
            "--workbook",
            action="store_true",
            help="also write an xlsx workbook next to the csv",
        )
        self.parser.add_argument(
            "-c",
            "--config_dir",
            type=str,
            help="configuration directory",
            default="config",
        )
        self.parser.add_argument(
            "-de",
            "--debug",
            action="store_true",
            help="""turn on debugging, default False""",
        )
        self.parser.add_argument(
            "-o",
            "--output_dir",
            type=str,
            help="output directory",
            default=f"output/{script_name}",
        )

        if parse:
            self.parse()

    def parse(self, args=None):
        """Parse the arguments and set the debug flag."""
        self.args = self.parser.parse_args(args, namespace=self)

        if self.args.debug:  # pyright: ignore[reportAttributeAccessIssue]
            for handler in logging.getLogger().handlers:
                handler.setLevel(logging.DEBUG)

        return self.args
