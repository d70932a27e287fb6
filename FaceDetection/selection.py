import logging

from FaceDetection import constants
from FaceDetection.constants import ClassifierSelection

logger = logging.getLogger(__name__)


def default_model_paths():
    return {
        ClassifierSelection.HAAR: constants.HAAR_CASCADE_PATH,
        ClassifierSelection.LBP: constants.LBP_CASCADE_PATH,
    }


class ClassifierToggle:
    """
    Mutually exclusive Haar / LBP selection backed by a CascadeDetector.
    """

    def __init__(self, detector, model_paths=None):
        self.detector = detector
        self.model_paths = model_paths if model_paths is not None else default_model_paths()
        self.selection = ClassifierSelection.NONE

    @property
    def can_start(self):
        return self.detector.is_loaded

    def select(self, kind):
        """
        Select a classifier and load its model. Returns True if the model loaded;
        on failure nothing stays selected.
        """
        if kind is ClassifierSelection.NONE:
            self.deselect()
            return False

        self.selection = kind
        path = self.model_paths.get(kind)
        if not self.detector.load(path):
            logger.error("Could not load the %s classifier from %s", kind.name, path)
            self.selection = ClassifierSelection.NONE
            return False
        return True

    def deselect(self):
        self.selection = ClassifierSelection.NONE
        self.detector.unload()

    def toggle(self, kind, checked):
        """Checkbox adapter: checking selects, unchecking the active classifier deselects."""
        if checked:
            return self.select(kind)
        if self.selection is kind:
            self.deselect()
        return False
