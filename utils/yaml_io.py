'''
Read and write SilverStripe style YAML config files.

A config file can hold several documents: header fragments (Name, Before,
After, Only, Except) followed by the actual settings. All documents are
loaded and written back; callers edit the settings document only.
'''
import yaml

HEADER_KEYS = {'Name', 'Before', 'After', 'Only', 'Except'}


class SingleQuoted(str):
    '''String that is always written as a single-quoted scalar'''


class ConfigDumper(yaml.SafeDumper):
    pass


def _represent_single_quoted(dumper, data):
    return dumper.represent_scalar('tag:yaml.org,2002:str', str(data), style="'")


ConfigDumper.add_representer(SingleQuoted, _represent_single_quoted)


class YamlConfigFile:
    '''All documents of one YAML config file'''

    def __init__(self, path, documents, explicit_start=False):
        self.path = path
        self.documents = documents
        self.explicit_start = explicit_start

    @classmethod
    def load(cls, path):
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()

        documents = [doc if doc is not None else {} for doc in yaml.safe_load_all(text)]
        if not documents:
            documents = [{}]

        for doc in documents:
            if not isinstance(doc, dict):
                raise yaml.YAMLError(f"{path}: expected a mapping, got {type(doc).__name__}")

        explicit_start = text.lstrip().startswith('---') or len(documents) > 1
        return cls(path, documents, explicit_start)

    @property
    def settings(self):
        '''The first document that is not just a header fragment'''
        for doc in self.documents:
            if not doc or not set(doc).issubset(HEADER_KEYS):
                return doc

        # Only headers: settings go into a new trailing document
        doc = {}
        self.documents.append(doc)
        self.explicit_start = True
        return doc

    def document_for(self, key):
        '''The document that already sets key, else the settings document'''
        for doc in self.documents:
            if key in doc:
                return doc
        return self.settings

    def dump(self):
        return yaml.dump_all(
            self.documents,
            Dumper=ConfigDumper,
            explicit_start=self.explicit_start,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True
        )

    def save(self):
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(self.dump())


def ensure_mapping(parent, key):
    '''Return parent[key] as a dict, creating or replacing it when needed'''
    value = parent.get(key)
    if not isinstance(value, dict):
        value = {}
        parent[key] = value
    return value
