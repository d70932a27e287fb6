import base64

import cv2
import numpy as np

from FaceDetection.detector import Rect
from FaceDetection.utils import frame_utils
from conftest import color_frame


def decode(photo_data):
    buf = np.frombuffer(base64.b64decode(photo_data), dtype=np.uint8)
    return cv2.imdecode(buf, cv2.IMREAD_COLOR)


def test_preprocess_returns_equalized_gray():
    frame = color_frame(120, 160)
    gray = frame_utils.preprocess_for_detection(frame)
    assert gray.shape == (120, 160)
    assert gray.dtype == np.uint8
    assert gray.max() == 255


def test_no_faces_leaves_frame_untouched():
    frame = color_frame()
    original = frame.copy()
    frame_utils.draw_faces(frame, [])
    assert np.array_equal(frame, original)


def test_draw_faces_outlines_in_green():
    frame = np.zeros((100, 100, 3), dtype=np.uint8)
    frame_utils.draw_faces(frame, [Rect(10, 20, 30, 40)])
    assert tuple(frame[20, 25]) == (0, 255, 0)  # top edge
    assert tuple(frame[40, 25]) == (0, 0, 0)  # interior


def test_fit_to_width_preserves_aspect_ratio():
    resized = frame_utils.fit_to_width(color_frame(480, 640))
    assert resized.shape == (450, 600, 3)


def test_photo_data_is_png_of_the_frame():
    frame = color_frame(300, 600)
    data = frame_utils.frame_to_photo_data(frame)
    assert base64.b64decode(data)[:8] == b"\x89PNG\r\n\x1a\n"
    assert np.array_equal(decode(data), frame)
