from pathlib import Path


# 获取项目根目录
BASE_DIR = Path(__file__).resolve().parents[1]

CONFIG_DIR = BASE_DIR / 'config'
