from typing import Dict, List, Tuple


class Configuration(object):
    """
Two level store: section name -> key -> value

Keys that appear before any section header live in the "" section.
Accessing a section that does not exist creates it empty.
"""

    def __init__(self):
        self._sections = {}  # type: Dict[str, Dict[str, str]]

    def section(self, name: str) -> Dict[str, str]:
        """
        Get a section, creating it if it is missing

        :param name: section name
        :returns: the (mutable) key/value mapping of the section
        """
        if name not in self._sections:
            self._sections[name] = {}
        return self._sections[name]

    def get(self, section: str, key: str, default: str = "") -> str:
        """
        Look up a value

        The section is created if missing, the key is not

        :param section: section name
        :param key: key name
        :param default: returned when the key is absent
        :returns: value
        """
        return self.section(section).get(key, default)

    def set(self, section: str, key: str, value: str) -> None:
        self.section(section)[key] = value

    def clear(self) -> None:
        self._sections.clear()

    def sections(self) -> List[str]:
        return sorted(self._sections.keys())

    def dump(self) -> List[Tuple[str, str, str]]:
        """
        All entries, for diagnostics

        :returns: (section, key, value) tuples sorted by section and key
        """
        return [(section, key, self._sections[section][key])
                for section in sorted(self._sections.keys())
                for key in sorted(self._sections[section].keys())]

    def as_dict(self) -> Dict[str, Dict[str, str]]:
        """
        Copy of the content as plain dictionaries

        :returns: new dict
        """
        return dict((name, dict(values)) for (name, values) in self._sections.items())

    def __getitem__(self, name: str) -> Dict[str, str]:
        return self.section(name)

    def __contains__(self, name: str) -> bool:
        return name in self._sections

    def __iter__(self):
        return iter(self.sections())

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other):
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self):
        return "Configuration(%r)" % (self._sections,)
