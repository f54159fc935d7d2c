"""For-all properties and the conversion of check outcomes into results."""