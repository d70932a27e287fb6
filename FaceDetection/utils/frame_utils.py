import base64

import cv2

from FaceDetection import constants


def preprocess_for_detection(frame_bgr):
    """
    Convert a BGR frame to grayscale and equalize its histogram
    so detection is less sensitive to lighting.
    """
    gray = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2GRAY)
    return cv2.equalizeHist(gray)


def draw_faces(frame, faces, color=constants.FACE_BOX_COLOR, thickness=constants.FACE_BOX_THICKNESS):
    for (x, y, w, h) in faces:
        cv2.rectangle(frame, (x, y), (x + w, y + h), color, thickness)
    return frame


def fit_to_width(frame, width=constants.DISPLAY_WIDTH):
    """
    Scale the frame to the given width, preserving the aspect ratio.
    """
    h, w = frame.shape[:2]
    if w == width:
        return frame
    height = max(1, int(round(h * width / float(w))))
    interpolation = cv2.INTER_AREA if width < w else cv2.INTER_LINEAR
    return cv2.resize(frame, (width, height), interpolation=interpolation)


def frame_to_photo_data(frame, width=constants.DISPLAY_WIDTH):
    """
    Encode a BGR (or grayscale) frame as base64 PNG text, ready for tk.PhotoImage(data=...).
    """
    ok, buf = cv2.imencode(".png", fit_to_width(frame, width))
    if not ok:
        raise ValueError("Cannot encode frame as PNG")
    return base64.b64encode(buf.tobytes()).decode("ascii")
