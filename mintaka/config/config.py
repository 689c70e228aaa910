import os
import yaml
from typing import Dict
from ..log import logger

logo = r'''--------------------------------------------------
     __  __ _       _        _
    |  \/  (_)_ __ | |_ __ _| | ____ _
    | |\/| | | '_ \| __/ _` | |/ / _` |
    | |  | | | | | | || (_| |   < (_| |
    |_|  |_|_|_| |_|\__\__,_|_|\_\__,_|

    A cycle-accurate RV32I pipeline model
--------------------------------------------------'''


def load_config(configfile: str, verbose: bool = False) -> Dict:
    """
    Load a YAML configuration and flatten it to keyword arguments:
    ``{section: {key: value}}`` becomes ``{'section_key': value}``.
    """
    if not os.path.isfile(configfile):
        raise FileNotFoundError(f'Configuration file does not exist: {configfile}')

    with open(configfile) as f:
        core_config = yaml.safe_load(f)
    if not isinstance(core_config, dict):
        raise ValueError(f'Invalid configuration file: {configfile}. Expected a mapping')

    config = {}
    for key, item in core_config.items():
        if isinstance(item, dict):
            for k2, i2 in item.items():
                config['{}_{}'.format(key, k2)] = i2
        else:
            config[key] = item

    if verbose:
        logger.info('\n%s\nConfiguration file: %s', logo, configfile)
        for key, item in config.items():
            if key.endswith('address') and isinstance(item, int):
                logger.info('- %s: %s', key, hex(item))
            else:
                logger.info('- %s: %s', key, item)

    return config
