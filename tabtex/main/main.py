import sys
import os.path
import fileinput
import json

import logging
logger = logging.getLogger(__name__)

import yaml
import frontmatter

from ..tabulator import Tabulator
from .importclass import get_row_renderer_class
from .clipboard import copy_to_clipboard
from .configmerger import ConfigMerger
configmerger = ConfigMerger()


default_config = {
    'tabtex': {
        'cell_delimiter': 'double-space',
        'placeholder': '\\empty',
        'wrap_math': True,
        'math_delimiters': ['\\( ', ' \\)'],
        'format': 'latex',
        'renderer': {},
    },
}


def load_external_configs(arg_config):
    r"""
    Return a list of configuration dictionaries to merge, in order of
    precedence.  `arg_config` may be a dictionary (used as is), the name of a
    YAML file, or `None` to look for ``tabtexconfig.yaml`` (or
    ``tabtexconfig.yml``) in the current directory.
    """

    if isinstance(arg_config, dict):
        return [ arg_config ]

    config_file = None
    if isinstance(arg_config, str) and arg_config:
        config_file = arg_config
    else:
        # only the FIRST EXISTING EXTENSION is read.
        for tryfname in ('tabtexconfig.yaml', 'tabtexconfig.yml'):
            if os.path.exists(tryfname):
                config_file = tryfname
                break

    if config_file is None:
        logger.debug("No config file to load")
        return [ {} ]

    with open(config_file, encoding='utf-8') as f:
        logger.info(f"Loading tabtex config from {config_file}")
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file ‘{config_file}’, expected a YAML mapping")
    data['$_cwd'] = os.path.dirname(config_file)

    return [ data ]



def parse_frontmatter_content(input_content):
    r"""
    Split off YAML front matter from `input_content`.  Returns a tuple
    `(frontmatter_metadata, content)`.

    A leading block delimited by ``---`` lines is only taken as front matter if
    it is a YAML mapping with a `tabtex` key.  Otherwise it is table content
    (e.g. a row of dashes), and the input is returned unchanged with empty
    metadata.
    """

    try:
        frontmatter_metadata, content = frontmatter.parse(input_content)
    except (yaml.YAMLError, ValueError) as e:
        logger.debug("Input does not start with YAML front matter (%s)", e)
        return {}, input_content

    if not isinstance(frontmatter_metadata, dict) \
       or not isinstance(frontmatter_metadata.get('tabtex', None), dict):
        if frontmatter_metadata:
            logger.debug("Ignoring front matter without a ‘tabtex’ section")
        return {}, input_content

    return frontmatter_metadata, content



class Main:
    def __init__(self, **kwargs):
        super().__init__()

        self.kwargs = kwargs

        self.arg_files = kwargs.get('files', None)
        self.arg_content = kwargs.get('content', None)
        self.arg_config = kwargs.get('config', None)
        self.arg_output = kwargs.get('output', None)
        self.arg_format = kwargs.get('format', None)
        self.arg_cell_delimiter = kwargs.get('cell_delimiter', None)
        self.arg_wrap_math = kwargs.get('wrap_math', None)
        self.arg_copy = kwargs.get('copy', False)
        self.arg_suppress_final_newline = kwargs.get('suppress_final_newline', None)

        arg_files = self.arg_files
        arg_content = self.arg_content

        # Get the input content

        input_content = ''
        if arg_content is not None:
            if arg_files is not None and len(arg_files):
                raise ValueError(
                    "You cannot specify both FILEs and --content options. "
                    "Type `tabtex --help` for more information."
                )
            input_content = arg_content
        elif arg_files is None:
            # doesn't happen on the command line because arg_files is always a
            # list, possibly an empty one.
            raise ValueError(
                r"No input specified. Please use content or specify input files."
            )
        else:
            for line in fileinput.input(files=arg_files, encoding='utf-8'):
                input_content += line

        frontmatter_metadata, content = parse_frontmatter_content(input_content)

        logger.debug("Input frontmatter_metadata is\n%s",
                     json.dumps(frontmatter_metadata, indent=4, default=str))

        # load config & defaults

        cmdline_config = {
            'tabtex': {
                'cell_delimiter': self.arg_cell_delimiter,
                'wrap_math': self.arg_wrap_math,
                'format': self.arg_format,
            },
        }

        config = configmerger.recursive_assign_defaults(
            [ cmdline_config, frontmatter_metadata ]
            + load_external_configs(self.arg_config)
            + [ default_config ]
        )

        logger.debug("Merged config is\n%s", json.dumps(config, indent=4, default=str))

        self.input_content = input_content
        self.frontmatter_metadata = frontmatter_metadata
        self.content = content
        self.config = config['tabtex']

    def make_tabulator(self):
        c = self.config
        return Tabulator(
            cell_delimiter=c['cell_delimiter'],
            placeholder=c['placeholder'],
            wrap_math=c['wrap_math'],
            math_delimiters=c['math_delimiters'],
        )

    def make_row_renderer(self):
        format_name = self.config['format']
        RowRendererClass = get_row_renderer_class(format_name)
        renderer_config = self.config['renderer'].get(format_name, None)
        logger.debug("Using row renderer %s with config %r",
                     RowRendererClass.__name__, renderer_config)
        return RowRendererClass(config=renderer_config)

    def run(self, skip_write_return_result=False):

        tabulator = self.make_tabulator()
        row_renderer = self.make_row_renderer()

        #
        # Run!
        #
        result = tabulator.transform(self.content, row_renderer=row_renderer)

        if skip_write_return_result:
            return {
                "result": result,
            }

        arg_output = self.arg_output

        #
        # Write to output
        #
        def open_context_fout():
            if not arg_output or arg_output == '-':
                return _TrivialContextManager(sys.stdout)
            elif hasattr(arg_output, 'write'):
                # it's a file-like object, use it directly
                return _TrivialContextManager(arg_output)
            else:
                return open(arg_output, 'w', encoding='utf-8')

        with open_context_fout() as fout:

            fout.write(result)

            if not self.arg_suppress_final_newline:
                fout.write("\n")

            if isinstance(arg_output, str) and arg_output != '-':
                logger.info('Output to ‘%s’', arg_output)

        clipboard_status = None
        if self.arg_copy:
            clipboard_status = copy_to_clipboard(result)
            if clipboard_status.success:
                logger.info(clipboard_status.message)
            else:
                logger.error(clipboard_status.message)

        return {
            'config': self.config,
            'content': self.content,
            'result': result,
            'output': arg_output,
            'clipboard_status': clipboard_status,
        }



def main(**kwargs):
    a = Main(**kwargs)
    return a.run()




# ------------------------------------------------------------------------------



class _TrivialContextManager:
    def __init__(self, value):
        super().__init__()
        self.value = value

    def __enter__(self):
        return self.value

    def __exit__(self, *args):
        pass
