"""tablejson 기본 파라미터"""
import os

CODEC_CONFIG = {
    "max_depth": int(os.getenv("TABLEJSON_MAX_DEPTH", "256")),  # table 중첩 한도
    "profile": bool(int(os.getenv("TABLEJSON_PROFILE", "0"))),  # cProfile per direction
}
