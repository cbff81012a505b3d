# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`htmlgen` builds HTML markup strings: tags, form controls, and attributes,
including CSS class/style merging and `data-*` attribute expansion.

The functions exported here are the methods of a default `Html` instance using `default_config`.
To render with different tables (attribute order, data attribute prefixes, void elements),
create an `Html` with a derived config: `Html(default_config.derive(void_elements={'br'}))`.
'''

from .attrs import fmt_attr, get_attribute_name
from .config import default_config, HtmlConfig
from .css import (add_css_class, add_css_style, css_style_from_dict, css_style_to_dict, merge_css_classes, remove_css_class,
  remove_css_style)
from .escape import attr_str, decode, encode, escape_js_regular_expression
from .exceptions import InvalidArgument
from .html import Html, wrap_into_condition
from .json import render_html_json
from .select import is_selected, normalize_selection, OptGroup


default_html = Html()

render_tag_attributes = default_html.render_tag_attributes
render_select_options = default_html.render_select_options

tag = default_html.tag
begin_tag = default_html.begin_tag
end_tag = default_html.end_tag
style = default_html.style
script = default_html.script
css_file = default_html.css_file
js_file = default_html.js_file
a = default_html.a
mailto = default_html.mailto
img = default_html.img
label = default_html.label
button = default_html.button
submit_button = default_html.submit_button
reset_button = default_html.reset_button
input = default_html.input
button_input = default_html.button_input
submit_input = default_html.submit_input
reset_input = default_html.reset_input
text_input = default_html.text_input
hidden_input = default_html.hidden_input
password_input = default_html.password_input
file_input = default_html.file_input
textarea = default_html.textarea
radio = default_html.radio
checkbox = default_html.checkbox
drop_down_list = default_html.drop_down_list
list_box = default_html.list_box
checkbox_list = default_html.checkbox_list
radio_list = default_html.radio_list
ul = default_html.ul
ol = default_html.ol
