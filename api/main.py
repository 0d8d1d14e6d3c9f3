"""
DisasterWatch - Vercel Serverless Entry Point
Serves the dashboard API: reports, filters, analytics, selection and maps
"""

import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from disasterwatch.api.main import app

# Vercel serverless handler
handler = app
