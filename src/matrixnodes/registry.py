from class_registry import ClassRegistry
from class_registry.entry_points import EntryPointClassRegistry

from .errors import InvalidConfiguration
from .logger import get_logger

logger = get_logger('registry')


class Register():
    def __init__(self):
        self.nodes = Entrypoint_Register(entrypoints='matrixnodes.nodes')

        self.collected_installed = False

    def collect_installed(self):
        logger.debug('Collecting installed Packages')

        if not self.collected_installed:
            self.nodes.collect_installed()
            self.collected_installed = True

        logger.info(f'Collected installed Nodes ({len(self.nodes)})')

    def installed_packages(self):
        packages = [item.__module__.split('.')[0] for item in self.nodes.values()]
        return list(dict.fromkeys(packages))


# wraps the ClassRegistry, so that keys are case insensitive and local and installed registries can be merged
class Entrypoint_Register():

    def __init__(self, entrypoints):
        self.reg = ClassRegistry()
        self.entrypoints = entrypoints

    def __len__(self):
        return len(list(self.reg.keys()))

    def __contains__(self, key):
        return key.lower() in self.reg

    def collect_installed(self):
        # load all findable packages
        self.installed_packages = EntryPointClassRegistry(self.entrypoints)
        self.add_register(self.installed_packages)

    def add_register(self, register):
        for key in register.keys():
            self.register(key=key, class_=register.get_class(key))

    def decorator(self, cls):
        self.register(key=cls.__name__, class_=cls)
        return cls

    def register(self, key, class_):
        logger.debug(f'Registered: {key.lower()} -> {class_}')
        return self.reg.register(key.lower())(class_)

    def get_class(self, key):
        try:
            return self.reg.get_class(key.lower())
        except KeyError:
            raise InvalidConfiguration(f'Unknown node "{key}". Available: {", ".join(sorted(self.reg.keys()))}')

    def get(self, key, *args, **kwargs):
        return self.get_class(key)(*args, **kwargs)

    def keys(self):
        return list(self.reg.keys())

    def values(self):
        return [self.reg.get_class(key) for key in self.reg.keys()]
