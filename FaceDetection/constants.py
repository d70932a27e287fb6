import os
from enum import Enum

import cv2


class ClassifierSelection(Enum):
    NONE = 0
    HAAR = 1
    LBP = 2


class CaptureState(Enum):
    IDLE = 0
    RUNNING = 1


VIDEO_SOURCE = 0

# Face Detection:
SCALE_FACTOR = 1.1
MIN_NEIGHBORS = 2
MIN_FACE_RATIO = 0.2  # min face size = 20% of the frame height

# Cascade models (override with env vars or --haar / --lbp)
DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
HAAR_CASCADE_PATH = os.environ.get(
    "FACE_DETECTION_HAAR_CASCADE",
    os.path.join(cv2.data.haarcascades, "haarcascade_frontalface_alt.xml"))
LBP_CASCADE_PATH = os.environ.get(
    "FACE_DETECTION_LBP_CASCADE",
    os.path.join(DATA_DIR, "lbpcascades", "lbpcascade_frontalface.xml"))

# Capture loop:
FRAME_PERIOD_MS = 33  # ~30 frames/sec

# Drawing
FACE_BOX_COLOR = (0, 255, 0)
FACE_BOX_THICKNESS = 3

# GUI Parameters
WINDOW_TITLE = "Face Detection and Tracking"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
DISPLAY_WIDTH = 600
BACKGROUND_COLOR = "whitesmoke"
UI_POLL_MS = 10

START_TEXT = "Start Camera"
STOP_TEXT = "Stop Camera"
