import argparse
import logging

import FaceDetectionApp
from FaceDetection import constants
from FaceDetection.constants import ClassifierSelection


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Live face detection with Haar or LBP cascades")
    parser.add_argument("--haar", default=constants.HAAR_CASCADE_PATH,
                        help="Path to the Haar frontal face cascade (default: %(default)s)")
    parser.add_argument("--lbp", default=constants.LBP_CASCADE_PATH,
                        help="Path to the LBP frontal face cascade (default: %(default)s)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, args.log_level),
    )
    model_paths = {
        ClassifierSelection.HAAR: args.haar,
        ClassifierSelection.LBP: args.lbp,
    }
    FaceDetectionApp.run(model_paths)


if __name__ == "__main__":
    main()
