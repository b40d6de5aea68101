# weight_ocr/libs/weight_ocr/weight_ocr/__init__.py
from .models import Box, DecodedText, DetectionInput, InferenceResult, RgbImage, TensorSpec, TextFragment, WeightReading
from .errors import OperatorContractError, PipelineError, UnsupportedShapeError
from .config import PipelineSettings, get_settings
from .operators import CallableOperator, Operator
from .char_dict import DIGIT_UNIT_DICT, load_char_dict
from .reading import parse_weight
from .pipeline import run_inference
