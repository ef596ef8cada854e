from .step_10_preconditions import PreconditionsStep
from .step_20_configure import ConfigureStep
from .step_30_install_sshfs import InstallSshfsStep
from .step_40_ssh_key import SshKeyStep
from .step_50_copy_key import CopyKeyStep
from .step_60_write_fstab import WriteFstabStep
from .step_70_mount import MountStep
from .step_80_paperless_layout import PaperlessLayoutStep

__all__ = [
    "PreconditionsStep",
    "ConfigureStep",
    "InstallSshfsStep",
    "SshKeyStep",
    "CopyKeyStep",
    "WriteFstabStep",
    "MountStep",
    "PaperlessLayoutStep",
]
