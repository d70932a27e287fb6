"""
FaceDetectionApp Class - live camera view with Haar / LBP face detection
"""

import logging
import queue
import tkinter as tk

from FaceDetection import constants
from FaceDetection.constants import ClassifierSelection
from FaceDetection.capture_loop import CaptureLoop
from FaceDetection.detector import CascadeDetector
from FaceDetection.frame_source import FrameSource
from FaceDetection.selection import ClassifierToggle

logger = logging.getLogger(__name__)


# =====================================
# FaceDetectionApp Class Definition
# =====================================

class FaceDetectionApp:
    # ---------------------
    # init functions
    # ---------------------
    def __init__(self, root, model_paths=None, frame_source=None):
        # ---------
        # General
        # ---------
        self.root = root
        self.root.title(constants.WINDOW_TITLE)
        self.root.geometry(f"{constants.WINDOW_WIDTH}x{constants.WINDOW_HEIGHT}")
        self.root.configure(bg=constants.BACKGROUND_COLOR)

        # Updates coming from the capture thread, drained on the Tk thread
        self.message_queue = queue.Queue()
        self.photo = None

        # ---------
        # Detection
        # ---------
        self.detector = CascadeDetector()
        self.classifiers = ClassifierToggle(self.detector, model_paths)
        self.capture = CaptureLoop(
            frame_source if frame_source is not None else FrameSource(),
            self.detector,
            publish=self.publish_frame,
            report_error=self.publish_error,
        )

        self.create_widgets()
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)
        self.root.after(constants.UI_POLL_MS, self.process_message_queue)

    def create_widgets(self):
        bg = constants.BACKGROUND_COLOR

        controls = tk.Frame(self.root, bg=bg)
        controls.pack(side=tk.TOP, pady=10)

        self.haar_var = tk.BooleanVar(value=False)
        self.lbp_var = tk.BooleanVar(value=False)
        self.haar_check = tk.Checkbutton(controls, text="Haar Classifier", variable=self.haar_var,
                                         command=self.on_haar_selected, bg=bg)
        self.haar_check.pack(side=tk.LEFT, padx=10)
        self.lbp_check = tk.Checkbutton(controls, text="LBP Classifier", variable=self.lbp_var,
                                        command=self.on_lbp_selected, bg=bg)
        self.lbp_check.pack(side=tk.LEFT, padx=10)

        self.image_label = tk.Label(self.root, bg=bg)
        self.image_label.pack(side=tk.TOP, expand=True)

        self.camera_button = tk.Button(self.root, text=constants.START_TEXT, command=self.start_camera,
                                       state=tk.DISABLED)
        self.camera_button.pack(side=tk.TOP, pady=10)

        self.status_label = tk.Label(self.root, text="", fg="firebrick", bg=bg)
        self.status_label.pack(side=tk.BOTTOM, fill=tk.X, pady=5)

    # =============================
    # Classifier Checkboxes
    # =============================

    def on_haar_selected(self):
        self.on_classifier_toggled(ClassifierSelection.HAAR, self.haar_var.get())

    def on_lbp_selected(self):
        self.on_classifier_toggled(ClassifierSelection.LBP, self.lbp_var.get())

    def on_classifier_toggled(self, kind, checked):
        if checked and not self.classifiers.select(kind):
            path = self.classifiers.model_paths.get(kind)
            self.show_status(f"Cannot load the {kind.name} classifier: {path}")
        elif checked:
            self.show_status("")
        else:
            self.classifiers.toggle(kind, False)
        self.sync_controls()

    def sync_controls(self):
        selection = self.classifiers.selection
        self.haar_var.set(selection is ClassifierSelection.HAAR)
        self.lbp_var.set(selection is ClassifierSelection.LBP)

        running = self.capture.is_running
        check_state = tk.DISABLED if running else tk.NORMAL
        self.haar_check.config(state=check_state)
        self.lbp_check.config(state=check_state)

        can_press = running or self.classifiers.can_start
        self.camera_button.config(state=tk.NORMAL if can_press else tk.DISABLED,
                                  text=constants.STOP_TEXT if running else constants.START_TEXT)

    # =============================
    # Camera
    # =============================

    def start_camera(self):
        if not self.capture.is_running:
            if self.capture.start():
                self.show_status("")
        else:
            self.capture.stop()
        self.sync_controls()

    def on_close(self):
        logger.info("Window closed, stopping capture")
        self.capture.stop()
        self.root.destroy()

    # =============================
    # Thread-safe UI updates
    # =============================

    def publish_frame(self, image_data):
        self.message_queue.put(("frame", image_data))

    def publish_error(self, message):
        self.message_queue.put(("error", message))

    def process_message_queue(self):
        latest_frame = None
        try:
            while True:
                kind, payload = self.message_queue.get_nowait()
                if kind == "frame":
                    latest_frame = payload
                else:
                    self.show_status(payload)
        except queue.Empty:
            pass

        if latest_frame is not None:
            self.show_frame(latest_frame)
        self.root.after(constants.UI_POLL_MS, self.process_message_queue)

    def show_frame(self, image_data):
        # keep a reference, Tk drops images that are garbage collected
        self.photo = tk.PhotoImage(data=image_data, format="png")
        self.image_label.config(image=self.photo)

    def show_status(self, message):
        self.status_label.config(text=message)


# ============================
# Run the Application
# ============================

def run(model_paths=None):
    root = tk.Tk()
    app = FaceDetectionApp(root, model_paths)
    root.mainloop()
    return app


if __name__ == "__main__":
    run()
