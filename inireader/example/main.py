import json
import sys

from inireader.ini import IniFile

filename = sys.argv[1] if len(sys.argv) > 1 else "config.ini"
ini = IniFile(filename)
result = ini.try_read()
if not result.ok:
    print("%s: %s" % (result.kind.value, result.error), file=sys.stderr)
    sys.exit(1)

print(json.dumps(result.value.as_dict(), indent=4, sort_keys=True))
