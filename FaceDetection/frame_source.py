"""
Frame source - wraps the default camera device.
"""
import logging

import cv2

from FaceDetection import constants

logger = logging.getLogger(__name__)


class FrameSource:
    def __init__(self, device_index=constants.VIDEO_SOURCE, capture_factory=cv2.VideoCapture):
        """
        device_index: camera index handed to the capture factory (0 = default camera).
        capture_factory: callable returning a cv2.VideoCapture-like object.
        """
        self.device_index = device_index
        self.capture_factory = capture_factory
        self.cap = None

    def open(self):
        """
        Open the camera. Returns True on success, False otherwise.
        """
        if self.is_open():
            return True
        try:
            cap = self.capture_factory(self.device_index)
        except cv2.error as e:
            logger.error("Cannot open camera %s: %s", self.device_index, e)
            return False

        if not cap.isOpened():
            cap.release()
            return False

        self.cap = cap
        logger.info("Camera %s opened", self.device_index)
        return True

    def is_open(self):
        return self.cap is not None and self.cap.isOpened()

    def read_frame(self):
        """
        Read one frame. Returns None when the camera is closed or yields nothing.
        """
        if not self.is_open():
            return None
        ret, frame = self.cap.read()
        if not ret or frame is None or frame.size == 0:
            return None
        return frame

    def release(self):
        if self.cap is None:
            return
        cap, self.cap = self.cap, None
        cap.release()
        logger.info("Camera %s released", self.device_index)
