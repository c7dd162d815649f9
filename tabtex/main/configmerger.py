import os.path

from collections.abc import Mapping

import yaml

import logging
logger = logging.getLogger(__name__)



class PresetKeepMarker:
    def __init__(self, marker):
        super().__init__()
        self.marker = marker

    def process_property(self, configmerger, presetarg, result, obj, remaining_obj_list,
                         property_path, top_level_obj):

        result[self.marker] = presetarg


# $import
class PresetImport:
    r"""
    Merge the contents of one or more other YAML files into the object in which
    ``$import: <file>`` (or ``$import: [<file1>, <file2>, ...]``) appears.
    Values in the object itself take precedence over the imported ones.
    Relative paths are relative to the folder of the config file.
    """

    def _fetch_import(self, target, cwd):
        fname = os.path.join(cwd or '.', target)
        logger.debug('$import: opening file %r', fname)
        with open(fname, encoding='utf-8') as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise ValueError(f"Invalid $import target ‘{target}’, expected a mapping")
        return data

    def process_property(self, configmerger, presetarg, result, obj, remaining_obj_list,
                         property_path, top_level_obj):
        import_targets = presetarg
        if isinstance(import_targets, str):
            import_targets = [ import_targets ]
        for import_target in import_targets:
            target_data = self._fetch_import(import_target, top_level_obj.get('$_cwd', '.'))
            result.update(configmerger.recursive_assign_defaults_dict(
                [ result, obj, target_data ] + remaining_obj_list,
                property_path,
                top_level_obj=top_level_obj
            ))
            logger.debug(f"processed property $import ‘{import_target}’ -> {result=}")


def get_default_presets():
    return {
        '$import': PresetImport(),

        # simple internal marker for the current object file's CWD
        '$_cwd': PresetKeepMarker('$_cwd'),
    }



def _get_preset_keyvals(d):
    if not isinstance(d, dict):
        return []
    return [(k,v) for (k,v) in d.items() if isinstance(k,str) and k.startswith('$')]


class ConfigMerger:
    r"""
    Merge a chain of configuration dictionaries.  Earlier dictionaries in the
    chain take precedence; nested dictionaries are merged recursively, while
    scalar values and lists are taken as a whole from the first dictionary that
    defines them.  A value of `None` counts as "not specified".
    """

    def __init__(self, presets=None):
        if presets is not None:
            self.presets = dict(presets)
        else:
            self.presets = get_default_presets()

    def recursive_assign_defaults(self, obj_list):
        return self.recursive_assign_defaults_dict(obj_list, [])

    def recursive_assign_defaults_dict(self, obj_list, property_path, *, top_level_obj=None):

        if len(obj_list) == 0:
            return {}

        result = {}

        for j, obj in enumerate(obj_list):
            remaining_obj_list = obj_list[j+1:]

            if obj is None:
                continue

            if not isinstance(obj, Mapping):
                logger.warning(
                    "Incompatible config merge, ignoring value %r for ‘%s’ in chain %r",
                    obj, ".".join(property_path), obj_list
                )
                continue

            if top_level_obj is None:
                this_top_level_obj = obj
            else:
                this_top_level_obj = top_level_obj

            # process any "meta"/preset keys.  Work on a copy so that the
            # caller's dictionaries are not modified.
            obj = dict(obj)
            for presetname, presetarg in _get_preset_keyvals(obj):
                del obj[presetname]
                if presetname not in self.presets:
                    raise ValueError(
                        f"Unknown config preset ‘{presetname}’ in ‘{'.'.join(property_path)}’"
                    )
                self.presets[presetname].process_property(
                    self, presetarg, result, obj, remaining_obj_list,
                    property_path,
                    top_level_obj=this_top_level_obj
                )

            for k in obj:

                if k in result or obj[k] is None:
                    # value is already in result, or not specified here
                    continue

                if isinstance(obj[k], Mapping):
                    # recurse into sub-properties
                    sub_result = self.recursive_assign_defaults_dict(
                        [obj[k]] + [
                            (o.get(k,{}) if isinstance(o,Mapping) else {})
                            for o in remaining_obj_list
                        ],
                        property_path + [k],
                        top_level_obj=this_top_level_obj
                    )
                    result[k] = sub_result

                else:
                    # simply copy the scalar (or list) value.
                    result[k] = obj[k]

        return result
