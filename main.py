from phonecode import run_encoder
import sys

if __name__ == '__main__':
    sys.exit(run_encoder(sys.argv[1:]))
