"""
Capture loop - grabs frames at a fixed rate, detects faces and publishes
the annotated frame for display.
"""
import logging

from FaceDetection import constants
from FaceDetection.constants import CaptureState
from FaceDetection.errors import ClassifierNotInitializedError
from FaceDetection.utils import frame_utils
from FaceDetection.utils.periodic import PeriodicTimer

logger = logging.getLogger(__name__)


class CaptureLoop:
    def __init__(self, frame_source, detector, publish, report_error=None,
                 period_ms=constants.FRAME_PERIOD_MS, timer_factory=PeriodicTimer):
        """
        frame_source: FrameSource (open / read_frame / release).
        detector: CascadeDetector.
        publish: called with the display image (base64 PNG text) of every processed frame.
            Runs on the timer thread, so it must hand off to the UI thread itself.
        report_error: optional callable(str) for user-visible diagnostics.
        """
        self.frame_source = frame_source
        self.detector = detector
        self.publish = publish
        self.report_error = report_error
        self.period_ms = period_ms
        self.timer_factory = timer_factory
        self.timer = None
        self.state = CaptureState.IDLE

    @property
    def is_running(self):
        return self.state is CaptureState.RUNNING

    def _report(self, message):
        if self.report_error is not None:
            self.report_error(message)

    # ---------------------
    # Lifecycle
    # ---------------------
    def start(self):
        """
        Open the camera and start grabbing frames. Returns True if the loop is running.
        """
        if self.is_running:
            return True

        if not self.detector.is_loaded:
            logger.error("Cannot start capture: classifier not initialized")
            self._report("Select a classifier before starting the camera")
            return False

        if not self.frame_source.open():
            logger.error("Failed to open the camera connection...")
            self._report("Failed to open the camera connection...")
            return False

        self.state = CaptureState.RUNNING
        self.timer = self.timer_factory(self.tick, self.period_ms)
        self.timer.start()
        logger.info("Capture started (%d ms period)", self.period_ms)
        return True

    def stop(self):
        """
        Cancel the schedule, wait about one period for an in-flight tick,
        then release the camera. Safe to call when already stopped.
        """
        self.state = CaptureState.IDLE

        timer, self.timer = self.timer, None
        if timer is not None and not timer.is_shutdown():
            timer.shutdown()
            if not timer.await_termination(self.period_ms / 1000.0):
                logger.warning("Frame capture still running, releasing the camera now...")
            logger.info("Capture stopped")

        self.frame_source.release()

    # ---------------------
    # Frame processing
    # ---------------------
    def tick(self):
        if not self.is_running:
            return

        frame = self.frame_source.read_frame()
        if frame is None:
            return

        try:
            frame = self.process_frame(frame)
            image = frame_utils.frame_to_photo_data(frame)
        except Exception as e:
            logger.error("Exception during the image elaboration: %s", e)
            self._report("Exception during the image elaboration: %s" % e)
            return

        # stop() may have run while this frame was being processed
        if not self.is_running:
            return
        self.publish(image)

    def process_frame(self, frame):
        """
        Detect faces in a BGR frame and draw them onto it.
        Without a loaded classifier the frame is returned unchanged.
        """
        gray = frame_utils.preprocess_for_detection(frame)
        try:
            faces = self.detector.detect(gray)
        except ClassifierNotInitializedError as e:
            logger.error("Detection skipped: %s", e)
            self._report("Detection skipped: %s" % e)
            return frame
        return frame_utils.draw_faces(frame, faces)
