import os
import typing

from arkclient.application import settings


class Context(dict):
    def __init__(self, *a, **kw):
        super().__init__(*a)
        self.configfile = kw.get('configfile', settings.CONFIG_FILENAME)
        self.update(
            {
                'configfile': {},
                'args': {},
                'default': {
                    'datadir': kw.get('datadir', settings.FILE_DIRECTORY),
                    'base_url': settings.DEFAULT_BASE_URL,
                    'timeout': None,
                    'proxy': None,
                    'user_agent': settings.USER_AGENT,
                    'debug': False
                }
            }
        )
        self.load_config()

    def load_config(self):
        values = {
            'f': ['timeout'],
            'b': ['debug']
        }
        filename = self.datadir + '/' + self.configfile
        if not os.path.exists(filename):
            return
        with open(filename, 'r') as f:
            lines = f.readlines()
        for i, line in enumerate(lines, 1):
            line = line.strip().replace(' ', '')
            if not line or line.startswith('#'):
                continue
            if '=' not in line:
                raise ValueError('Configuration file error: expected key=value: %s (%s:%s)' % (line, filename, i))
            k, v = line.split('=', 1)
            k = k.replace('-', '_')
            if k not in self['default']:
                raise ValueError('Configuration file error: parameter not admitted: %s (%s:%s)' % (line, filename, i))
            if k in values['f']:
                self['configfile'][k] = float(v)
            elif k in values['b']:
                self['configfile'][k] = v.lower() in ('1', 'true', 'yes')
            else:
                self['configfile'][k] = v

    def load_args(self, args: typing.Dict):
        for k in args:
            if k not in self['default']:
                raise ValueError('Parameter not admitted: %s' % k)
        self['args'] = {k: v for k, v in args.items() if v is not None}

    def _get_param(self, key):
        for layer in ('args', 'configfile', 'default'):
            if key in self[layer]:
                return self[layer][key]

    @property
    def datadir(self) -> str:
        return self['args'].get('datadir') or self['default']['datadir']

    @property
    def base_url(self) -> str:
        return self._get_param('base_url')

    @property
    def timeout(self) -> typing.Optional[float]:
        timeout = self._get_param('timeout')
        return None if timeout is None else float(timeout)

    @property
    def proxy(self) -> typing.Optional[str]:
        return self._get_param('proxy')

    @property
    def user_agent(self) -> str:
        return self._get_param('user_agent')

    @property
    def debug(self) -> bool:
        return bool(self._get_param('debug'))
