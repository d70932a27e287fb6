class FaceDetectionError(Exception):
    """Base class for errors raised by the face detection components."""


class ClassifierNotInitializedError(FaceDetectionError):
    def __init__(self, message="classifier not initialized"):
        super().__init__(message)
