import logging
from typing import Iterable

from cosigner.settings import SettingUpdate

logger = logging.getLogger(__name__)

LABELS = {
    "code_sign_style": "`ProvisioningStyle` (Xcode 8) and `CODE_SIGN_STYLE` (Xcode 9+)",
}


def describe(update: SettingUpdate) -> str:
    label = LABELS.get(update.parameter)
    if label is None:
        # sdk-qualified variants repeat the plain key
        label = "`{}`".format(update.keys[0])
    return f'Updating Xcode project\'s {label} to "{update.value}"'


def log_updates(updates: Iterable[SettingUpdate]) -> None:
    for update in updates:
        logger.info(describe(update))
