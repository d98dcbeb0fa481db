import os
import json

def char_replace(instr):
	for char in ['(', ')', '[', ']', ',', '/', "'", ":", ";", "&", ".", "#"]:
		instr = instr.replace(char, '')
	instr = instr.strip()
	instr = instr.replace(' ', '_')
	return instr.lower()

def makedirs(output, name):
	outdir = os.path.abspath(output + "/" + char_replace(name))
	if not os.path.exists(outdir):
		os.makedirs(outdir)
	return outdir

def write_table(jsondir, struct):
	filename = create_table_filename(jsondir, struct)
	with open(filename, 'w') as fp:
		json.dump(struct, fp, indent=4)
	return filename

def create_table_filename(jsondir, struct):
	title = jsondir + "/" + char_replace(struct['class']) + ".json"
	return os.path.abspath(title)
