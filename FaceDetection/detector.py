import logging
import math
import os
from collections import namedtuple

import cv2

from FaceDetection import constants
from FaceDetection.errors import ClassifierNotInitializedError

logger = logging.getLogger(__name__)

Rect = namedtuple("Rect", ["x", "y", "w", "h"])


def compute_min_face_size(frame_height, ratio=constants.MIN_FACE_RATIO):
    """
    Minimum face size in pixels for a frame of the given height,
    rounded half-up. May be 0 for very small frames.
    """
    return int(math.floor(frame_height * ratio + 0.5))


class CascadeDetector:
    """
    Wraps a cv2.CascadeClassifier (Haar or LBP). At most one model is active;
    loading a new one replaces the previous, a failed load leaves none.
    """

    def __init__(self, cascade_factory=cv2.CascadeClassifier):
        self.cascade_factory = cascade_factory
        self.face_cascade = None
        self.model_path = None
        self.absolute_face_size = 0

    @property
    def is_loaded(self):
        return self.face_cascade is not None

    def load(self, model_path):
        """
        Load a trained cascade from disk. Returns True on success.
        """
        self.unload()

        if not model_path or not os.path.isfile(model_path):
            logger.error("Cascade file not found: %s", model_path)
            return False

        cascade = self.cascade_factory()
        try:
            loaded = cascade.load(model_path)
        except cv2.error as e:
            logger.error("Cannot load cascade %s: %s", model_path, e)
            return False

        if not loaded or cascade.empty():
            logger.error("Invalid cascade file: %s", model_path)
            return False

        self.face_cascade = cascade
        self.model_path = model_path
        logger.info("Loaded cascade %s", model_path)
        return True

    def unload(self):
        self.face_cascade = None
        self.model_path = None

    def min_face_size(self, gray_frame):
        # computed once from the first frame that gives a non-zero size
        if self.absolute_face_size == 0:
            size = compute_min_face_size(gray_frame.shape[0])
            if size > 0:
                self.absolute_face_size = size
        return self.absolute_face_size

    def detect(self, gray_frame):
        """
        Detect faces in an (equalized) grayscale frame.

        Returns:
            list of Rect (x, y, w, h) in the frame's pixel space.
        Raises:
            ClassifierNotInitializedError if no model is loaded.
        """
        if self.face_cascade is None:
            raise ClassifierNotInitializedError()

        size = self.min_face_size(gray_frame)
        faces = self.face_cascade.detectMultiScale(
            gray_frame,
            scaleFactor=constants.SCALE_FACTOR,
            minNeighbors=constants.MIN_NEIGHBORS,
            flags=cv2.CASCADE_SCALE_IMAGE,
            minSize=(size, size),
        )
        return [Rect(int(x), int(y), int(w), int(h)) for (x, y, w, h) in faces]
