
import os

from traitlets import Enum, Integer, Bool, HasTraits, TraitError, validate
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


class StructDiffConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def config_path():
    """Directories searched for structdiff_config.json, highest priority first."""
    return [
        os.getcwd(),
        os.path.join(os.path.expanduser('~'), '.config', 'structdiff'),
    ]


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False, path=None):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    if path is None:
        path = config_path()
    for c in _load_config_files('structdiff_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, StructDiffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(StructDiffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Diffing(StructDiffConfigurable):

    substitution_cost = Integer(
        2,
        help="cost of pairing two unequal elements when aligning sequences.",
    ).tag(config=True)

    indel_cost = Integer(
        1,
        help="cost of leaving an element unmatched when aligning sequences.",
    ).tag(config=True)

    @validate('substitution_cost', 'indel_cost')
    def _validate_cost(self, proposal):
        if proposal['value'] < 0:
            raise TraitError('alignment costs need to be non-negative')
        return proposal['value']


class Asserting(StructDiffConfigurable):

    include_file_position = Bool(
        True,
        help="prefix failure messages with the file position of the assertion.",
    ).tag(config=True)

    position_depth = Integer(
        5,
        help="maximal number of caller frames included in a file position.",
    ).tag(config=True)

    wrap_width = Integer(
        80,
        help="width from which value mismatch messages are split over several lines.",
    ).tag(config=True)


class Printing(StructDiffConfigurable):

    use_color = Bool(
        True,
        help="whether to color removed and added lines in terminal output.",
    ).tag(config=True)


class StructDiff(Global, Diffing, Printing):
    pass


class Pytest(Asserting, Diffing):
    pass


entrypoint_configurables = {
    'structdiff': StructDiff,
    'pytest': Pytest,
}
