import sys
import os

# Serverless platforms import this file from api/, so the repo root has to be importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import app

# Entry point picked up by the serverless runtime
handler = app
