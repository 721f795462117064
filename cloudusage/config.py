"""
Settings for the cloud usage reports.

Every toml in the config directory is loaded into Config.settings by file
name (without the .toml). The reports read settings.toml:

[users.clusters]
user = 'admin'
enc = 'password'

[ontapapi.general]
base_api_path = '/api'
timeout = 10

[cloud]
scheme = 'gs'
report_prefix = 'reports/'

A toml with a [settings] section of type='data' holds per cluster entries
under [clusters.<hostname>] and can override the user and enc of a cluster.

When no user is configured the netapp_user and netapp_pass environment
variables are used, and those can be put in a .env file in the working
directory.
"""
import tomllib
import logging
import pathlib
import sys
import os

from dotenv import load_dotenv

file_name = pathlib.Path(__file__).name

DEFAULTS = {
    'ontapapi': {'general': {'base_api_path': '/api', 'timeout': 10}},
    'cloud': {'scheme': 'gs', 'report_prefix': 'reports/'},
}


class Config:
    def __init__(self, config_dir, output_dir, args=None, env_file='.env'):
        self.data = {}
        self.args = args
        self.config_dir = pathlib.Path.cwd() / config_dir
        self.data_types = ['clusters']
        self.settings = {}
        self.parse_data()
        self.script_name = pathlib.Path(sys.argv[0]).stem
        self.output_dir = pathlib.Path(os.getcwd()) / output_dir
        os.makedirs(self.output_dir, exist_ok=True)
        if load_dotenv(env_file):
            logging.debug(f"{file_name} : loaded environment from {env_file}")

    def parse_data(self):
        if not self.config_dir.is_dir():
            logging.warning(f"{file_name} : config directory {self.config_dir} not found, using defaults")
            return

        all_tomls = self.config_dir.rglob('*.toml')
        loaded_tomls = []
        for file in all_tomls:
            logging.debug(f"{file_name} : parsing {file}")
            self.parse_toml(file)
            loaded_tomls.append(file.stem)

        logging.debug(f"{file_name} : loaded the following files: {', '.join(loaded_tomls)}")

    def parse_toml(self, file):
        with open(file, "rb") as f:
            data = tomllib.load(f)
            if 'settings' in data and 'type' in data['settings'] and data['settings']['type'] == 'data':
                logging.debug(f"{file_name} : data file: {file.stem}")
                self.load_data(data)
            else:
                logging.debug(f"{file_name} : config file: {file.stem}")
                if file.stem not in self.settings:
                    self.settings[file.stem] = data
                else:
                    self.settings[file.stem].update(data)

    def load_data(self, data):
        for data_type in self.data_types:
            if data_type not in self.data:
                self.data[data_type] = {}
            if data_type in data:
                logging.debug(f"{file_name} : adding {len(data[data_type])} {data_type} items")
                self.data[data_type].update(data[data_type])

    def get_setting(self, section, *keys_and_default):
        """
        get a value from settings.toml, falling back to DEFAULTS and then
        to the last argument

        >>> config.get_setting('ontapapi', 'general', 'timeout', 10)
        10
        """
        *keys, default = keys_and_default
        for source in (self.settings.get('settings', {}), DEFAULTS):
            value = source.get(section)
            for key in keys:
                if not isinstance(value, dict):
                    value = None
                    break
                value = value.get(key)
            if value is not None:
                return value
        return default

    def get_user(self, utype="clusters", uobject=""):
        user = None
        enc = None

        try:
            user = self.settings['settings']['users'][utype]['user']
            enc = self.settings['settings']['users'][utype]['enc']
        except KeyError:
            pass

        try:
            user = self.data[utype][uobject]['user']
            enc = self.data[utype][uobject]['enc']
        except KeyError:
            pass

        if not user:
            user = os.environ.get('netapp_user')
        if not enc:
            enc = os.environ.get('netapp_pass')

        if not user:
            logging.error(f"{file_name} : Could not find user for {utype} and {uobject}, set netapp_user")
            sys.exit(1)
        if not enc:
            logging.error(f"{file_name} : Could not find password for {utype} and {uobject}, set netapp_pass")
            sys.exit(1)

        return user, enc
