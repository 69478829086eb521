from .config_property import ConfigProperty
from .backup_package import BackupPackage
