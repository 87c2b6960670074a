# NetworkTables schema for communication with a Limelight camera

# Default table name (also the camera's hostname)
DEFAULT_TABLE = "limelight"

# Raw detection arrays
RAW_DETECTIONS = "rawdetections"  # 12 values per neural detection
RAW_FIDUCIALS = "rawfiducials"  # 7 values per AprilTag

# Primary target metrics
TARGET_VALID = "tv"  # 1 if a valid target is present
TARGET_X = "tx"  # Horizontal offset from crosshair (degrees)
TARGET_Y = "ty"  # Vertical offset from crosshair (degrees)
TARGET_X_NC = "txnc"  # Horizontal offset from principal pixel (degrees)
TARGET_Y_NC = "tync"  # Vertical offset from principal pixel (degrees)
TARGET_AREA = "ta"  # Target area (0-100% of image)
TARGET_T2D = "t2d"  # 17-value metrics array
CLASSIFIER_CLASS = "tcclass"  # Neural classifier class name
DETECTOR_CLASS = "tdclass"  # Neural detector class name
TARGET_COLOR = "tc"  # [H, S, V]
TAG_ID = "tid"  # Primary AprilTag id
TARGET_CLASS = "tclass"  # Primary neural class name
RAW_BARCODES = "rawbarcodes"  # String array of barcode payloads

# Pipeline state
PIPELINE_LATENCY = "tl"  # Pipeline latency (ms)
CAPTURE_LATENCY = "cl"  # Capture latency (ms)
CURRENT_PIPELINE = "getpipe"  # Active pipeline index
CURRENT_PIPELINE_TYPE = "getpipetype"  # Active pipeline type
JSON_RESULTS = "json"  # Full JSON results dump

# 3D transforms, [x, y, z, roll, pitch, yaw] in meters/degrees
BOTPOSE_TARGET_SPACE = "botpose_targetspace"
CAMERAPOSE_TARGET_SPACE = "camerapose_targetspace"
TARGETPOSE_CAMERA_SPACE = "targetpose_cameraspace"
TARGETPOSE_ROBOT_SPACE = "targetpose_robotspace"
CAMERAPOSE_ROBOT_SPACE = "camerapose_robotspace"
STANDARD_DEVIATIONS = "stddevs"  # MT1 xyz/rpy followed by MT2 xyz/rpy

# Hardware
HARDWARE_METRICS = "hw"  # [FPS, CPU temp, RAM usage, temp]

# Pose estimate topics (pose + aggregates + 7 values per tag)
BOTPOSE_WPIRED = "botpose_wpired"
BOTPOSE_ORB_WPIRED = "botpose_orb_wpired"
BOTPOSE_WPIBLUE = "botpose_wpiblue"
BOTPOSE_ORB_WPIBLUE = "botpose_orb_wpiblue"

# Settings entries
LED_MODE = "ledMode"
PIPELINE_INDEX = "pipeline"
PRIORITY_TAG_ID = "priorityid"
STREAM_MODE = "stream"
CROP_WINDOW = "crop"  # [minX, maxX, minY, maxY]
IMU_MODE = "imumode_set"
IMU_ASSIST_ALPHA = "imuassistalpha_set"
THROTTLE = "throttle_set"  # Frames skipped between processed frames
FIDUCIAL_DOWNSCALE = "fiducial_downscale_set"
FIDUCIAL_OFFSET = "fiducial_offset_set"  # [x, y, z] meters
CAMERAPOSE_ROBOT_SPACE_SET = "camerapose_robotspace_set"
FIDUCIAL_ID_FILTERS = "fiducial_id_filters_set"
ROBOT_ORIENTATION = "robot_orientation_set"  # [yaw, yawrate, pitch, pitchrate, roll, rollrate]

# Snapshot HTTP endpoint
SNAPSHOT_PORT = 5807
SNAPSHOT_REQUEST = "capturesnapshot"
SNAPSHOT_NAME_HEADER = "snapname"

# Wire layout constants
T2D_LENGTH = 17
POSE_ARRAY_PREFIX = 11  # 6 pose values + latency, tag count, span, avg dist, avg area
POSE_QUEUE_DEPTH = 20  # Pose samples kept per estimator between polls
