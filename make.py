import sys
import subprocess
import datetime

def run(cmd: str):
    print(f"@ {cmd}")
    return subprocess.call(cmd, shell=True)

def python(script: str):
    return run(f"{sys.executable} {script}")

def test_f():
    run(f"{sys.executable} -m pytest -v")

def selfdump_f():
    python("dump.py -n 64 dump.py")

def install_f():
    run(f"{sys.executable} -m pip install -e .[test]")

def all_f():
    test_f()
    selfdump_f()

def usage():
    [print(cmd[:-2]) for cmd in globals() if cmd.endswith('_f')]

for cmd in sys.argv[1:]:
    started = datetime.datetime.now()
    print(cmd)
    globals()[f"{cmd}_f"]()
    print(">", f"{datetime.datetime.now() - started}")

if len(sys.argv) < 2:
    usage()
