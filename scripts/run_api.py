#!/usr/bin/env python
"""
Run the region pricing API.

Usage:
    python scripts/run_api.py
"""
import os
import subprocess
import sys
from pathlib import Path


def main():
    project_root = Path(__file__).parent.parent

    env = os.environ.copy()
    src_path = str(project_root / 'src')
    env['PYTHONPATH'] = os.pathsep.join(p for p in (src_path, env.get('PYTHONPATH')) if p)

    cmd = [
        sys.executable, '-m', 'uvicorn', 'region_pricing.api.main:app',
        '--host', '0.0.0.0', '--port', '8000', '--reload',
    ]
    print(f"Starting Region Pricing API: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=str(project_root), env=env)
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
