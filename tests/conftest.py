import os

# Keep telelog off the terminal while tests run; set before awildtxt imports.
os.environ.setdefault("AWILDTXT_DISABLE_CONSOLE", "1")
