import sys

print("etl", sys.argv[1:])
